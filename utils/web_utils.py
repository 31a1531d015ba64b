from playwright.sync_api import Locator

HIGHLIGHT_STYLE = "outline: 2px solid red !important;"


def highlight_element(locator: Locator, style: str = HIGHLIGHT_STYLE):
    """
    Outlines the element the locator points to.
    Returns the original 'style' attribute so reset_element_style() can restore it.
    """
    original_style = locator.evaluate("el => el.getAttribute('style')")
    locator.evaluate(
        "(el, extra) => el.setAttribute('style', (el.getAttribute('style') || '') + '; ' + extra)",
        style,
    )
    return original_style


def reset_element_style(locator: Locator, original_style: str | None):
    if original_style is None:
        locator.evaluate("el => el.removeAttribute('style')")
    else:
        locator.evaluate("(el, style) => el.setAttribute('style', style)", original_style)
