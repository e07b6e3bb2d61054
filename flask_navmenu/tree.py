"""
Recursive rendering of a page tree into nested Bootstrap lists.
"""
import logging
from typing import Callable, List, Optional

from .active import ActiveBranchResolver, ActivePage
from .markup import MarkupAssembler
from .navigation import AbstractContainer, Page
from .options import RenderOptions

log = logging.getLogger(__name__)

LEVEL_INDENT = " " * 8
ITEM_INDENT = " " * 4


class TreeRenderer(object):
    """
    Walks a container and assembles the menu markup.

    Each page is either skipped (not accepted, outside the depth bounds or
    off the active branch), rendered as a leaf, or rendered with a nested
    list built from its own children one level deeper. Pages above
    ``min_depth`` are never rendered themselves, their descendants are
    lifted into the top level list.
    """

    def __init__(
        self,
        accept: Callable[..., bool],
        resolver: ActiveBranchResolver,
        assembler: MarkupAssembler,
        render_invisible: bool = False,
    ):
        self.accept = accept
        self.resolver = resolver
        self.assembler = assembler
        self.render_invisible = render_invisible

    def render(self, container: AbstractContainer, options: RenderOptions) -> str:
        if options.only_active_branch and not options.render_parents:
            return self.render_deepest_menu(container, options)
        return self.render_normal_menu(container, options)

    # Normal menu

    def render_normal_menu(
        self, container: AbstractContainer, options: RenderOptions
    ) -> str:
        found = self.resolver.find_active(
            container, options.min_depth, options.max_depth
        )
        items = self._render_items(container, 0, options, found)
        if not items:
            return ""
        html = self._render_list(items, 0, None, options)
        return html.rstrip("\n")

    def _render_items(
        self,
        container: AbstractContainer,
        level: int,
        options: RenderOptions,
        found: Optional[ActivePage],
    ) -> List[str]:
        """Returns the ``<li>`` blocks for the accepted pages of a container"""
        items = []
        min_depth, max_depth = options.min_depth, options.max_depth
        for page in container:
            if level < min_depth:
                if max_depth is None or level < max_depth:
                    items.extend(self._render_items(page, level + 1, options, found))
                continue

            accepted, is_active = self.is_page_accepted(page, level, options, found)
            if not accepted:
                continue

            children = []
            if max_depth is None or level < max_depth:
                children = self._render_items(page, level + 1, options, found)
            items.append(
                self._render_item(page, level, is_active, children, options)
            )
        return items

    def _render_item(
        self,
        page: Page,
        level: int,
        is_active: bool,
        children: List[str],
        options: RenderOptions,
    ) -> str:
        depth = level - options.min_depth
        indent = options.indent + LEVEL_INDENT * depth
        variant = options.variant
        has_subpages = self.has_accepted_subpages(page, level, options.max_depth)

        li_classes, attributes = self.assembler.item_attributes(
            page, options, depth, has_subpages, is_active
        )
        li_attributes = self.assembler.class_attribute(li_classes)
        if depth == 0:
            li_attributes += self.assembler.attribute("role", variant.li_role)

        details = has_subpages and variant.use_details
        html = [indent + ITEM_INDENT + "<li" + li_attributes + ">\n"]
        if details:
            html.append(indent + LEVEL_INDENT + "<details>\n")
        html.append(
            indent
            + LEVEL_INDENT
            + self.assembler.page_html(
                page,
                attributes,
                has_subpages,
                sublink=variant.sublink,
                escape_labels=options.escape_labels,
            )
            + "\n"
        )
        if children:
            html.append(self._render_list(children, depth + 1, page, options))
        if details:
            html.append(indent + LEVEL_INDENT + "</details>\n")
        html.append(indent + ITEM_INDENT + "</li>\n")
        return "".join(html)

    def _render_list(
        self,
        items: List[str],
        depth: int,
        parent: Optional[Page],
        options: RenderOptions,
    ) -> str:
        indent = options.indent + LEVEL_INDENT * depth
        variant = options.variant
        if depth == 0:
            attributes = ' class="{0}"'.format(
                self.assembler.escaper.escape_html_attr(options.ul_class)
            )
            attributes += self.assembler.attribute("role", variant.ul_role)
        else:
            attributes = self.assembler.class_attribute(list(variant.sublist_classes))
            if parent is not None:
                attributes += self.assembler.attribute("aria-labelledby", parent.id)
        return "{0}<{1}{2}>\n{3}{0}</{1}>\n".format(
            indent, variant.list_tag, attributes, "".join(items)
        )

    # Deepest menu

    def render_deepest_menu(
        self, container: AbstractContainer, options: RenderOptions
    ) -> str:
        """
        Renders only the innermost list of the active branch: the children
        of the active page, or its siblings when it has no children to show.
        """
        min_depth, max_depth = options.min_depth, options.max_depth
        found = self.resolver.find_active(container, min_depth - 1, max_depth)
        if found is None:
            return ""

        active_page = found.page
        only_visible = not self.render_invisible
        if found.depth < min_depth:
            # special case, the active page is one level above min_depth
            if not active_page.has_pages(only_visible):
                return ""
        elif not active_page.has_pages(only_visible):
            active_page = active_page.parent
        elif max_depth is not None and found.depth + 1 > max_depth:
            active_page = active_page.parent

        indent = options.indent
        variant = options.variant
        html = []
        for page in active_page:
            if not self.accept(page):
                continue
            is_active = page.is_active(True)
            li_classes, attributes = self.assembler.item_attributes(
                page, options, 0, False, is_active
            )
            html.append(
                indent
                + ITEM_INDENT
                + "<li"
                + self.assembler.class_attribute(li_classes)
                + self.assembler.attribute("role", variant.li_role)
                + ">\n"
            )
            html.append(
                indent
                + LEVEL_INDENT
                + self.assembler.page_html(
                    page,
                    attributes,
                    False,
                    sublink=variant.sublink,
                    escape_labels=options.escape_labels,
                )
                + "\n"
            )
            html.append(indent + ITEM_INDENT + "</li>\n")

        if not html:
            return ""
        return "{0}<ul{1}{2}>\n{3}{0}</ul>".format(
            indent,
            self.assembler.attribute("class", options.ul_class),
            self.assembler.attribute("role", variant.ul_role),
            "".join(html),
        )

    # Filters

    def is_page_accepted(
        self,
        page: Page,
        level: int,
        options: RenderOptions,
        found: Optional[ActivePage],
    ):
        """Returns ``(accepted, is_active)`` for a page at ``level``"""
        if level < options.min_depth or not self.accept(page):
            return False, False
        is_active = page.is_active(True)
        accepted = True
        if options.only_active_branch and not is_active:
            # not active itself, but it may be a child or sibling of the active page
            accepted = self.is_active_branch(found, page, options.max_depth)
        return accepted, is_active

    def is_active_branch(
        self, found: Optional[ActivePage], page: Page, max_depth: Optional[int]
    ) -> bool:
        if found is None:
            return False
        found_page = found.page
        if found_page.has_page(page):
            return True
        parent = found_page.parent
        if parent is not None and parent.has_page(page):
            # siblings show when the active page has no children to render
            return not found_page.has_pages(not self.render_invisible) or (
                max_depth is not None and found.depth + 1 > max_depth
            )
        return False

    def has_accepted_subpages(
        self, page: Page, level: int, max_depth: Optional[int]
    ) -> bool:
        if not page.has_pages(True):
            return False
        if max_depth is not None and level + 1 > max_depth:
            return False
        return any(self.accept(subpage, False) for subpage in page)
