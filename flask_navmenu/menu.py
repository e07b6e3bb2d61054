from abc import ABC, abstractmethod
import logging
from typing import Any, Dict, Optional, Union

from markupsafe import Markup

from .accept import AcceptHelper
from .active import ActiveBranchResolver, ActivePage, FindActive
from .const import (
    DEFAULT_LI_ACTIVE_CLASS,
    DEFAULT_UL_CLASS,
    LOGMSG_ERR_NO_PARTIAL,
    LOGMSG_ERR_PARTIAL_LIST,
    LOGMSG_ERR_RENDER,
)
from .container import ContainerParser
from .exceptions import ConfigurationError
from .html import Escaper, HtmlElement
from .markup import MarkupAssembler
from .navigation import AbstractContainer, Container, Page
from .options import RenderPolicy, get_whitespace
from .templating import TemplateRenderer
from .tree import TreeRenderer

log = logging.getLogger(__name__)


class NavigationHelper(ABC):
    """
    Shared state and plumbing of the navigation helpers: the default
    container, the ACL settings, the translator and the partial template.
    """

    helper_name = "navigation"

    def __init__(
        self,
        container_parser: Optional[ContainerParser] = None,
        escaper: Optional[Escaper] = None,
        html_element: Optional[HtmlElement] = None,
        template_renderer: Optional[TemplateRenderer] = None,
        translator: Optional[Any] = None,
        acl: Optional[Any] = None,
        role: Optional[str] = None,
    ):
        """
        Initialize a navigation helper.

        Args:
            container_parser: Resolves container names and instances
            escaper: HTML escaper for labels and attributes
            html_element: Serializer for the link elements
            template_renderer: Renders partial templates
            translator: Optional label/title translator
            acl: Default authorization object, see :class:`AcceptHelper`
            role: Default role checked against the authorization object
        """
        self.container_parser = container_parser or ContainerParser()
        self.escaper = escaper or Escaper()
        self.html_element = html_element or HtmlElement(self.escaper)
        self.template_renderer = template_renderer or TemplateRenderer()
        self.translator = translator
        self.acl = acl
        self.role = role
        self.use_acl = True
        self.render_invisible = False
        self.min_depth: Optional[int] = None
        self.max_depth: Optional[int] = None
        self.partial = None
        self.container: Optional[AbstractContainer] = None
        self._indent = ""

    def __call__(self, container=None):
        """Helper entry point, optionally switching the default container"""
        if container is not None:
            self.set_container(container)
        return self

    def __str__(self):
        try:
            return self.render()
        except Exception:
            log.exception(LOGMSG_ERR_RENDER.format(self.helper_name))
            return ""

    def __html__(self):
        return str(self)

    @property
    def indent(self) -> str:
        return self._indent

    @indent.setter
    def indent(self, value: Union[int, str, None]) -> None:
        self._indent = get_whitespace(value)

    def set_container(self, container=None) -> "NavigationHelper":
        self.container = self.container_parser.parse(container)
        return self

    def get_container(self) -> AbstractContainer:
        if self.container is None:
            self.container = Container()
        return self.container

    def resolve_container(self, container=None) -> AbstractContainer:
        container = self.container_parser.parse(container)
        if container is None:
            container = self.get_container()
        return container

    def get_min_depth(self) -> int:
        if not isinstance(self.min_depth, int) or self.min_depth < 0:
            return 0
        return self.min_depth

    def get_authorization(self):
        return self.acl if self.use_acl else None

    def get_accept_helper(self) -> AcceptHelper:
        return AcceptHelper(
            authorization=self.get_authorization(),
            render_invisible=self.render_invisible,
            role=self.role,
        )

    def get_resolver(self) -> ActiveBranchResolver:
        return ActiveBranchResolver(FindActive(self.get_accept_helper()))

    def accept(self, page: Page, recursive: bool = True) -> bool:
        """
        Whether a page may be rendered with the current ACL and visibility
        settings, see :class:`AcceptHelper`.
        """
        return self.get_accept_helper().accept(page, recursive)

    def find_active(
        self, container=None, min_depth: Optional[int] = None, max_depth=-1
    ) -> Optional[ActivePage]:
        """
        Finds the deepest active page of a container.

        Args:
            container: Container, container name or None for the default
            min_depth: Minimum depth, None uses the helper's min depth
            max_depth: Maximum depth, None means unbounded and a negative
                value uses the helper's max depth

        Returns:
            An ``ActivePage(page, depth)`` or None
        """
        container = self.resolve_container(container)
        if min_depth is None:
            min_depth = self.get_min_depth()
        if max_depth is not None and (not isinstance(max_depth, int) or max_depth < 0):
            max_depth = self.max_depth
        return self.get_resolver().find_active(container, min_depth, max_depth)

    def get_partial_template(self, partial):
        if partial is None:
            partial = self.partial
        if partial is None or partial == "" or partial == [] or partial == ():
            raise ConfigurationError(LOGMSG_ERR_NO_PARTIAL.format(self.helper_name))
        if isinstance(partial, (list, tuple)):
            if len(partial) != 1:
                raise ConfigurationError(
                    LOGMSG_ERR_PARTIAL_LIST.format(self.helper_name)
                )
            partial = partial[0]
        return partial

    def render_partial(self, container=None, partial=None) -> str:
        """
        Renders the given partial template with the container,
        without going through the menu renderer.
        """
        return self.render_partial_with_params({}, container, partial)

    @abstractmethod
    def render_partial_with_params(
        self, params: Dict[str, Any], container=None, partial=None
    ) -> str:
        """
        Render the partial template.

        Args:
            params: Extra template context
            container: Container, container name or None for the default
            partial: Template name, ``[name]`` or None for the helper's partial

        Returns:
            The rendered template
        """
        pass

    @abstractmethod
    def render(self, container=None) -> str:
        """
        Render the helper's default output for a container.
        """
        pass


class Menu(NavigationHelper):
    """
    Renders a navigation container as nested Bootstrap ``nav`` lists.

    Every render option can be given per call to :meth:`render_menu`,
    options left out fall back to the attributes of the helper::

        menu = Menu()
        menu.ul_class = "main"
        html = menu.render_menu(container, max_depth=1, direction="end")
    """

    helper_name = "menu"

    def __init__(self, *args, **kwargs):
        super(Menu, self).__init__(*args, **kwargs)
        self.ul_class = DEFAULT_UL_CLASS
        self.li_active_class = DEFAULT_LI_ACTIVE_CLASS
        self.only_active_branch = False
        self.render_parents = True
        self.add_class_to_list_item = False

    def get_tree_renderer(self) -> TreeRenderer:
        accept_helper = self.get_accept_helper()
        return TreeRenderer(
            accept_helper.accept,
            ActiveBranchResolver(FindActive(accept_helper)),
            MarkupAssembler(self.escaper, self.html_element, self.translator),
            render_invisible=self.render_invisible,
        )

    def render(self, container=None) -> str:
        """Renders with the partial template when one is set, else as a menu"""
        if self.partial:
            return self.render_partial(container)
        return self.render_menu(container)

    def render_menu(self, container=None, **options) -> str:
        """
        Renders the menu of a container.

        Args:
            container: Container, container name or None for the default
            **options: Render options (ul_class, li_class, li_active_class,
                min_depth, max_depth, only_active_branch, render_parents,
                add_class_to_list_item, escape_labels, indent, style,
                vertical, direction, sublink, tabs, pills, fill, justified,
                centered, right_aligned, in_navbar, dark)

        Returns:
            The menu markup, an empty string when nothing is rendered

        Raises:
            ConfigurationError: For unknown or invalid options
        """
        container = self.resolve_container(container)
        render_options = RenderPolicy(self).normalize(options)
        return Markup(self.get_tree_renderer().render(container, render_options))

    def render_sub_menu(
        self,
        container=None,
        ul_class: Optional[str] = None,
        indent: Union[int, str, None] = None,
        li_active_class: Optional[str] = None,
        li_class: Optional[str] = None,
    ) -> str:
        """
        Renders the innermost list of the active branch, the local
        navigation of the current page.
        """
        return self.render_menu(
            container,
            indent=indent,
            ul_class=ul_class,
            li_class=li_class,
            min_depth=None,
            max_depth=None,
            only_active_branch=True,
            render_parents=False,
            escape_labels=True,
            add_class_to_list_item=False,
            li_active_class=li_active_class,
        )

    def htmlify(
        self, page: Page, escape_label: bool = True, add_class_to_list_item: bool = False
    ) -> str:
        """
        Returns the link markup of a single page. The page class is left
        out, so ``add_class_to_list_item`` makes no difference here.
        """
        assembler = MarkupAssembler(self.escaper, self.html_element, self.translator)
        return assembler.page_html(page, {}, True, escape_labels=escape_label)

    def render_partial_with_params(
        self, params: Dict[str, Any], container=None, partial=None
    ) -> str:
        partial = self.get_partial_template(partial)
        container = self.resolve_container(container)
        data = dict(params)
        data["container"] = container
        return Markup(self.template_renderer.render(partial, data))
