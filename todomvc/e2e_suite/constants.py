"""Constants for the TodoMVC application under test."""

import re

TODO_MVC_URL = "https://demo.playwright.dev/todomvc/"
TODO_MVC_TITLE = re.compile("TodoMVC")

FIRST_TODO = "Complete Playwright Challenge"
SECOND_TODO = "Submit the Challenge"

NEW_TODO_INPUT = ".new-todo"
TODO_LIST = ".todo-list"
TODO_ITEM = ".todo-list li"
TODO_TOGGLE = ".toggle"
COMPLETED_FILTER = 'a[href="#/completed"]'
VISIBLE_TODOS = ".todo-list li:not(.hidden)"

TWO_TODOS = 2
ONE_TODO = 1

COMPLETED_CLASS = re.compile("completed")
