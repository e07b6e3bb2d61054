import logging
from typing import Any, Dict, List, Optional

from markupsafe import Markup

from .markup import MarkupAssembler
from .menu import NavigationHelper
from .navigation import Page

log = logging.getLogger(__name__)


class Breadcrumbs(NavigationHelper):
    """
    Renders the active branch of a container as a Bootstrap breadcrumb.

    The deepest active page comes last, as plain text unless ``link_last``
    is set. Pages above ``min_depth`` (1 by default) are not part of the
    trail.
    """

    helper_name = "breadcrumbs"

    def __init__(self, *args, **kwargs):
        super(Breadcrumbs, self).__init__(*args, **kwargs)
        self.link_last = False
        self.separator = " &gt; "

    def get_min_depth(self) -> int:
        if not isinstance(self.min_depth, int) or self.min_depth < 0:
            return 1
        return self.min_depth

    def get_assembler(self) -> MarkupAssembler:
        return MarkupAssembler(self.escaper, self.html_element, self.translator)

    def render(self, container=None) -> str:
        if self.partial:
            return self.render_partial(container)
        return self.render_straight(container)

    def render_straight(self, container=None) -> str:
        container = self.resolve_container(container)
        content = self.render_items(container)
        if not content:
            return ""
        indent = self.indent
        html = (
            '{0}<nav aria-label="breadcrumb">\n'
            '{0}    <ul class="breadcrumb">\n'
            "{1}"
            "{0}    </ul>\n"
            "{0}</nav>\n"
        ).format(indent, content)
        return Markup(html)

    def render_items(self, container) -> str:
        active = self.find_active(container)
        if active is None:
            return ""
        assembler = self.get_assembler()
        page = active.page

        if self.link_last:
            content = self.htmlify(page, assembler)
        else:
            content = self.escaper.escape_html(
                assembler.translate(str(page.label or ""), page)
            )
        # parents up to the root of the given container come first
        parents = self.get_resolver().build_branch(page, True, container)[:-1]
        html = [self.render_item(self.htmlify(parent, assembler), parent) for parent in parents]
        html.append(self.render_item(content, page))

        separator = "{0}        {1}\n".format(self.indent, self.separator)
        return separator.join(html)

    def htmlify(self, page: Page, assembler: Optional[MarkupAssembler] = None) -> str:
        assembler = assembler or self.get_assembler()
        return assembler.page_html(page, {"class": page.css_class}, False)

    def render_item(self, content: str, page: Page) -> str:
        classes = ["breadcrumb-item"]
        aria = ""
        if page.get("li-class"):
            classes.append(page.get("li-class"))
        if page.is_active():
            classes.append("active")
            aria = ' aria-current="page"'
        indent = self.indent
        return (
            '{0}        <li class="{1}"{2}>\n'
            "{0}            {3}\n"
            "{0}        </li>\n"
        ).format(indent, self.escaper.escape_html_attr(" ".join(classes)), aria, content)

    def render_partial_with_params(
        self, params: Dict[str, Any], container=None, partial=None
    ) -> str:
        partial = self.get_partial_template(partial)
        container = self.resolve_container(container)

        data = dict(params)
        data["separator"] = self.separator
        pages: List[Page] = []
        active = self.find_active(container)
        if active is not None:
            pages = self.get_resolver().build_branch(active.page, True, container)
        data["pages"] = pages
        return Markup(self.template_renderer.render(partial, data))
