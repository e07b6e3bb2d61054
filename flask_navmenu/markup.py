from typing import Any, Dict, List, Optional, Tuple

from .const import (
    SITEMAP_PROPERTIES,
    STYLE_SUBLINK_BUTTON,
    STYLE_SUBLINK_DETAILS,
    STYLE_SUBLINK_SPAN,
)
from .html import Escaper, HtmlElement
from .navigation import Page
from .options import RenderOptions, combine_classes


class MarkupAssembler(object):
    """
    Builds the markup of a single page: the classes of its ``<li>`` and
    the element (``a``, ``span``, ``button`` or ``summary``) for its link.
    """

    def __init__(
        self,
        escaper: Escaper,
        html_element: HtmlElement,
        translator: Optional[Any] = None,
    ):
        self.escaper = escaper
        self.html_element = html_element
        self.translator = translator

    def item_attributes(
        self,
        page: Page,
        options: RenderOptions,
        level: int,
        has_subpages: bool,
        is_active: bool,
    ) -> Tuple[List[str], Dict[str, Any]]:
        """
        Returns the ``<li>`` classes and the link attributes of a page.

        :param level: depth of the page in the rendered list, 0 is top level
        :param has_subpages: the page gets a toggle for its sub menu
        :param is_active: the page is in the active branch
        """
        variant = options.variant
        li_classes: List[str] = []
        page_classes: List[str] = []
        attributes: Dict[str, Any] = {}

        if level == 0:
            li_classes.append("nav-item")
            page_classes.append("nav-link")
            if options.item_class:
                page_classes.append(options.item_class)
            if variant.link_role and not has_subpages:
                attributes["role"] = variant.link_role
        else:
            page_classes.append("dropdown-item")

        if has_subpages:
            li_classes.append(variant.dropdown_class)
            page_classes.extend(variant.toggle_classes)
            attributes.update(variant.toggle_attributes)
            attributes["aria-expanded"] = "false"
            attributes["role"] = "button"

        if is_active:
            li_classes.append(options.li_active_class)
            if level == 0:
                attributes["aria-current"] = "page"
            li_classes.append(page.get("li-active-class"))

        li_classes.append(options.li_class)
        li_classes.append(page.get("li-class"))

        if options.add_class_to_list_item and page.css_class:
            li_classes.append(page.css_class)
        elif page.css_class:
            page_classes.append(page.css_class)

        attributes["class"] = combine_classes(*page_classes)
        return li_classes, attributes

    def translate(self, message: Optional[str], page: Page) -> Optional[str]:
        if self.translator is None or message is None or message == "":
            return message
        return self.translator.translate(message, page.text_domain)

    def page_html(
        self,
        page: Page,
        attributes: Dict[str, Any],
        has_subpages: bool,
        sublink: Optional[str] = None,
        escape_labels: bool = True,
    ) -> str:
        """Serializes the link element of a page"""
        label = self.translate(str(page.label or ""), page)
        title = self.translate(page.title, page)

        attributes = dict(attributes)
        attributes["id"] = page.id
        attributes["title"] = title

        if has_subpages and sublink == STYLE_SUBLINK_DETAILS:
            element = "summary"
        elif has_subpages and sublink == STYLE_SUBLINK_BUTTON:
            element = "button"
            attributes["type"] = "button"
        elif (has_subpages and sublink == STYLE_SUBLINK_SPAN) or not page.href:
            element = "span"
        else:
            element = "a"
            attributes["href"] = page.href
            attributes["target"] = page.target

        attributes.update(page.custom_properties)
        for name in SITEMAP_PROPERTIES:
            attributes.pop(name, None)

        if label and escape_labels:
            label = self.escaper.escape_html(label)

        return self.html_element.render(element, attributes, label)

    def class_attribute(self, classes: List[Optional[str]]) -> str:
        """`` class="..."`` for the given classes, empty when there are none"""
        combined = combine_classes(*classes)
        if not combined:
            return ""
        return ' class="{0}"'.format(self.escaper.escape_html_attr(combined))

    def attribute(self, name: str, value: Optional[str]) -> str:
        if not value:
            return ""
        return ' {0}="{1}"'.format(name, self.escaper.escape_html_attr(value))
