import json
import re
import time
from datetime import datetime
from pathlib import Path
import pytest
from playwright.sync_api import sync_playwright
from builders.smart_page_builder import SmartPageBuilder
from helpers.test_context import get_config, set_config
from services.page_service import PageService
from utils.config_utils import get_effective_config


ROOT_DIR = Path(__file__).resolve().parent
REPORT_DIR = Path.cwd() / "reports"
REPORT_FILE = REPORT_DIR / "report.html"


# ---------------------------------------------------------------------------
# Load configuration
# ---------------------------------------------------------------------------
with open(ROOT_DIR / "config.json", encoding="utf-8") as f:
    CONFIG = json.load(f)


# ---------------------------------------------------------------------------
# CLI options
# ---------------------------------------------------------------------------
def pytest_addoption(parser):
    parser.addoption(
        "--highlight",
        action="store",
        choices=["true", "false"],
        help="Highlight elements during tests",
    )

    parser.addoption(
        "--screenshot_on_error",
        action="store",
        choices=["true", "false"],
        help="Capture screenshot on test failure",
    )

    parser.addoption(
        "--step_delay",
        action="store",
        type=int,
        help="Delay (in ms) between steps",
    )


# ---------------------------------------------------------------------------
# Config fixture
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def config(pytestconfig):
    # Browser and headless, provided by pytest-playwright when installed
    browser = pytestconfig.getoption("browser", default=None)
    headed = pytestconfig.getoption("headed", default=None)

    overrides = {
        "browser": browser[0] if isinstance(browser, list) and browser else browser or None,
        "headless": False if headed else None,
        "highlight": pytestconfig.getoption("highlight"),
        "screenshot_on_error": pytestconfig.getoption("screenshot_on_error"),
        "step_delay": pytestconfig.getoption("step_delay"),
    }

    # Command line, then config file, then environment
    cfg = get_effective_config(CONFIG, overrides)
    set_config(cfg)
    yield cfg
    set_config({})


# ---------------------------------------------------------------------------
# Page builder fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def page_builder():
    """A builder with an empty plan cache."""
    return SmartPageBuilder()


@pytest.fixture
def page_service(page, page_builder):
    return PageService(page, page_builder)


# ---------------------------------------------------------------------------
# Playwright fixtures
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def playwright_instance():
    """Provide a shared Playwright instance."""
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance, config):
    """Launch a browser based on config."""
    browser_name = config.get("browser", "chromium")
    headless = config.get("headless", True)
    browser = getattr(playwright_instance, browser_name).launch(headless=headless)
    yield browser
    browser.close()


@pytest.fixture(scope="function")
def context(browser, config):
    """New browser context per test."""
    context = browser.new_context()
    context.set_default_timeout(config.get("timeout", 30000))
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context, config):
    """New page per test."""
    page = context.new_page()
    page.set_default_timeout(config.get("timeout", 30000))
    yield page
    page.close()


def pytest_configure(config):
    """Make sure reports/ exists and direct pytest-html there."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    config.option.htmlpath = str(REPORT_FILE)


def safe_filename(name: str) -> str:
    """
    Convert any string (like test names or parameterized values)
    into a filesystem-safe filename.
    Keeps letters, digits, underscore, dash, and dot only.
    """
    # Replace all invalid filename chars with '_'
    name = re.sub(r'[<>:"/\\|?*\s,=#@!%^&;{}()+\[\]]+', '_', name)
    # Collapse consecutive underscores
    name = re.sub(r'_+', '_', name)
    # Trim leading/trailing underscores or dots
    name = name.strip('._')
    return name[:150]  # limit length to avoid OS path length issues


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a Playwright screenshot and attach it to the HTML report."""
    outcome = yield
    rep = outcome.get_result()

    # Run only when the test itself failed
    if rep.when != "call" or not rep.failed:
        return

    if not get_config().get("screenshot_on_error", True):
        return

    # Import safely inside hook (pytest loads this very early)
    from playwright.sync_api import Page

    page = item.funcargs.get("page", None)
    if not page or not isinstance(page, Page):
        return

    # Build unique name: {test-name}-yyyy-MM-dd-hh-mm-ss-sss.png
    ts = datetime.now().strftime("%Y-%m-%d-%H-%M-%S-%f")[:-3]
    screenshot_path = REPORT_DIR / f"{safe_filename(item.name)}-{ts}.png"

    try:
        # Give browser time to render any failure overlay
        time.sleep(0.2)
        page.screenshot(path=str(screenshot_path), full_page=True)
    except Exception as e:
        print(f"[WARN] Screenshot capture failed: {e}")
        return

    print(f"[INFO] Screenshot saved → {screenshot_path}")

    # Attach to pytest-html report
    html = item.config.pluginmanager.getplugin("html")
    if html:
        rel_path = screenshot_path.name
        link_html = f'<a href="{rel_path}" target="_blank">Open Screenshot</a>'
        rep.extras = getattr(rep, "extras", [])
        rep.extras.append(html.extras.html(link_html))
        rep.extras.append(html.extras.image(rel_path))
