"""
Navigation page tree consumed by the menu helpers.

A :class:`Container` holds an ordered list of :class:`Page` trees. Every
page is itself a container for its sub pages and keeps a non owning
reference to its parent (a page or the root container).
"""
from typing import Any, Dict, Iterator, List, Optional


class AbstractContainer(object):
    """Ordered collection of pages shared by containers and pages"""

    def __init__(self, pages=None):
        self.pages: List["Page"] = []
        for page in pages or []:
            self.add_page(page)

    def __iter__(self) -> Iterator["Page"]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    def __bool__(self) -> bool:
        # an empty container is still a container
        return True

    def add_page(self, page) -> "Page":
        """
        Adds a page (or a dict describing one) as the last child

        :param page: a :class:`Page` or a dict accepted by :meth:`Page.factory`
        :return: the added page
        """
        if isinstance(page, dict):
            page = Page.factory(page)
        if page.parent is not None and page.parent is not self:
            page.parent.remove_page(page)
        page.parent = self
        if not self.has_page(page):
            self.pages.append(page)
        return page

    def add_pages(self, pages) -> None:
        for page in pages:
            self.add_page(page)

    def remove_page(self, page: "Page") -> bool:
        for i, child in enumerate(self.pages):
            if child is page:
                del self.pages[i]
                page.parent = None
                return True
        return False

    def has_page(self, page: "Page", recursive: bool = False) -> bool:
        for child in self.pages:
            if child is page:
                return True
            if recursive and child.has_page(page, recursive=True):
                return True
        return False

    def has_pages(self, only_visible: bool = False) -> bool:
        if only_visible:
            return any(page.is_visible() for page in self.pages)
        return bool(self.pages)

    def find_one_by(self, name: str, value: Any) -> Optional["Page"]:
        """Returns the first page, depth first, whose property ``name`` equals ``value``"""
        for page in self.pages:
            if page.get(name) == value:
                return page
            found = page.find_one_by(name, value)
            if found is not None:
                return found
        return None


class Container(AbstractContainer):
    """Root of a navigation tree"""

    @classmethod
    def from_list(cls, pages: List[Dict[str, Any]]) -> "Container":
        return cls(pages=[Page.factory(page) for page in pages])

    def __repr__(self):
        return "<Container pages={0}>".format(len(self.pages))


class Page(AbstractContainer):
    """
    One node of the navigation tree.

    Any keyword not matching a native property ends in ``properties``,
    which is how ``li-class``, ``li-active-class`` and arbitrary link
    attributes (``data-*``, ``rel``...) are given to a page.
    """

    NATIVE_PROPERTIES = (
        "id",
        "label",
        "title",
        "text_domain",
        "target",
        "href",
        "css_class",
        "visible",
        "active",
        "resource",
        "privilege",
    )

    def __init__(
        self,
        label: str = "",
        href: str = "",
        id: Optional[str] = None,
        title: Optional[str] = None,
        text_domain: str = "default",
        target: Optional[str] = None,
        css_class: Optional[str] = None,
        visible: bool = True,
        active: bool = False,
        resource: Optional[str] = None,
        privilege: Optional[str] = None,
        pages=None,
        properties: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        self.parent: Optional[AbstractContainer] = None
        self.label = label
        self.href = href
        self.id = id
        self.title = title
        self.text_domain = text_domain
        self.target = target
        self.css_class = css_class
        self.visible = visible
        self.active = active
        self.resource = resource
        self.privilege = privilege
        self.properties: Dict[str, Any] = dict(properties or {})
        self.properties.update(kwargs)
        super(Page, self).__init__(pages=pages)

    @classmethod
    def factory(cls, options: Dict[str, Any]) -> "Page":
        """
        Builds a page tree from a dict, ``pages`` holds the children
        and ``class``/``uri`` are accepted as aliases of
        ``css_class``/``href``.
        """
        options = dict(options)
        if "class" in options:
            options["css_class"] = options.pop("class")
        if "uri" in options:
            options["href"] = options.pop("uri")
        if "textDomain" in options:
            options["text_domain"] = options.pop("textDomain")
        pages = [
            page if isinstance(page, Page) else cls.factory(page)
            for page in options.pop("pages", None) or []
        ]
        return cls(pages=pages, **options)

    def get(self, name: str, default: Any = None) -> Any:
        """Returns a native or custom property by name"""
        if name == "class":
            name = "css_class"
        if name in self.NATIVE_PROPERTIES:
            return getattr(self, name, default)
        return self.properties.get(name, default)

    def set(self, name: str, value: Any) -> None:
        if name == "class":
            name = "css_class"
        if name in self.NATIVE_PROPERTIES:
            setattr(self, name, value)
        else:
            self.properties[name] = value

    @property
    def custom_properties(self) -> Dict[str, Any]:
        return dict(self.properties)

    def is_active(self, recursive: bool = False) -> bool:
        """
        Whether the page is active, with ``recursive`` a page is also
        active when any of its descendants is.
        """
        if not self.active and recursive:
            return any(page.is_active(True) for page in self.pages)
        return bool(self.active)

    def is_visible(self, recursive: bool = False) -> bool:
        if recursive and self.visible and isinstance(self.parent, Page):
            return self.parent.is_visible(True)
        return bool(self.visible)

    def __repr__(self):
        return "<Page {0!r}>".format(self.id or self.label)
