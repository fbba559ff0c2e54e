"""Page object for the TodoMVC demo application."""

import allure
from playwright.sync_api import Locator, Page, expect

from todomvc.e2e_suite import constants
from todomvc.e2e_suite.pages.base_page import BasePage


class TodoMVCPage(BasePage):
    """Actions and assertions on the TodoMVC page."""

    def __init__(self, page: Page, base_url: str = constants.TODO_MVC_URL) -> None:
        """Initialize the page object.

        Args:
            page: Playwright page to drive
            base_url: URL the TodoMVC application is served from

        """
        super().__init__(page)
        self.base_url = base_url

    @property
    def new_todo_input(self) -> Locator:
        """Input used to create a new todo."""
        return self.page.locator(constants.NEW_TODO_INPUT)

    @property
    def todo_items(self) -> Locator:
        """All items in the todo list."""
        return self.page.locator(constants.TODO_ITEM)

    @property
    def visible_todos(self) -> Locator:
        """Todo items left visible by the active filter."""
        return self.page.locator(constants.VISIBLE_TODOS)

    @property
    def completed_filter(self) -> Locator:
        """Link that filters the list to completed todos."""
        return self.page.locator(constants.COMPLETED_FILTER)

    def navigate_to_todo_mvc(self) -> None:
        """Open the application and wait for it to settle."""
        self.goto(self.base_url)
        self.page.wait_for_load_state("networkidle")

    @allure.step("Verify page title")
    def verify_page_title(self) -> None:
        """Assert the page title mentions TodoMVC."""
        expect(self.page).to_have_title(constants.TODO_MVC_TITLE)

    @allure.step("Add todo '{text}'")
    def add_todo(self, text: str) -> None:
        """Type a todo into the input and submit it."""
        self.new_todo_input.fill(text)
        self.new_todo_input.press("Enter")

    @allure.step("Verify {expected_count} todos")
    def verify_todo_count(self, expected_count: int) -> None:
        """Assert the list holds exactly ``expected_count`` todos."""
        expect(self.todo_items).to_have_count(expected_count)

    @allure.step("Verify todo {index} contains '{expected_text}'")
    def verify_todo_text_by_index(self, index: int, expected_text: str) -> None:
        """Assert the todo at ``index`` contains ``expected_text``."""
        expect(self.todo_items.nth(index)).to_contain_text(expected_text)

    @allure.step("Toggle todo {index}")
    def toggle_todo_by_index(self, index: int) -> None:
        """Click the completion toggle of the todo at ``index``."""
        self.todo_items.nth(index).locator(constants.TODO_TOGGLE).click()

    @allure.step("Verify todo {index} is completed")
    def verify_todo_completed_by_index(self, index: int) -> None:
        """Assert the todo at ``index`` is marked completed."""
        expect(self.todo_items.nth(index)).to_have_class(constants.COMPLETED_CLASS)

    @allure.step("Show completed todos")
    def click_completed_filter(self) -> None:
        """Switch the list to the Completed filter."""
        self.completed_filter.click()

    @allure.step("Verify {expected_count} visible todos")
    def verify_visible_todo_count(self, expected_count: int) -> None:
        """Assert exactly ``expected_count`` todos are visible."""
        expect(self.visible_todos).to_have_count(expected_count)

    @allure.step("Verify visible todo contains '{expected_text}'")
    def verify_visible_todo_text(self, expected_text: str) -> None:
        """Assert the first visible todo contains ``expected_text``."""
        expect(self.visible_todos.first).to_contain_text(expected_text)

    @allure.step("Verify visible todo is completed")
    def verify_visible_todo_completed(self) -> None:
        """Assert the first visible todo is marked completed."""
        expect(self.visible_todos.first).to_have_class(constants.COMPLETED_CLASS)
