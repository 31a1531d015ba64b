from typing import Annotated
from playwright.sync_api import Locator
from decorators.class_decorators import page_object
from enums.how import How
from locators.element_locator import ElementLocator
from locators.native_attributes import FindsBy
from wrappers.smart_element import SmartElement
from wrappers.smart_page import SmartPage


@page_object
class LoginPage(SmartPage):
    url = "/"

    username_input: Annotated[SmartElement, ElementLocator(id="user-name")]
    password_input: Annotated[SmartElement, ElementLocator(id="password"),
                              FindsBy(How.NAME, "password", priority=1)]
    login_button: Annotated[SmartElement, FindsBy(How.ID, "login-button")]
    error_message: Annotated[Locator, FindsBy(How.CSS, "[data-test='error']")]

    def fill_form(self, username, password):
        self.username_input.fill(username)
        self.password_input.fill(password)

    def submit_form(self):
        self.login_button.click()

    def login(self, username, password):
        self.fill_form(username, password)
        self.submit_form()
