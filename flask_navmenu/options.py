"""
Render options of the menu helper.

:class:`RenderPolicy` merges the options given to one render call over the
helper's defaults and validates them. The result, :class:`RenderOptions`,
is immutable and carries a :class:`RenderVariant` with the class and tag
fragments resolved once for the whole call.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from .const import (
    DROP_ORIENTATION_DOWN,
    DROP_ORIENTATION_END,
    DROP_ORIENTATION_START,
    DROP_ORIENTATION_UP,
    LOGMSG_ERR_SIZE,
    LOGMSG_ERR_UNKNOWN_OPTION,
    SIZES,
    STYLE_OL,
    STYLE_SUBLINK_BUTTON,
    STYLE_SUBLINK_DETAILS,
    STYLE_SUBLINK_LINK,
    STYLE_SUBLINK_SPAN,
    STYLE_UL,
)
from .exceptions import ConfigurationError

RENDER_OPTIONS = frozenset(
    (
        "ul_class",
        "li_class",
        "li_active_class",
        "min_depth",
        "max_depth",
        "only_active_branch",
        "render_parents",
        "add_class_to_list_item",
        "escape_labels",
        "indent",
        "style",
        "vertical",
        "direction",
        "sublink",
        "tabs",
        "pills",
        "fill",
        "justified",
        "centered",
        "right_aligned",
        "in_navbar",
        "dark",
    )
)

# ul decoration, in the order the classes are emitted
UL_FLAG_CLASSES = (
    ("tabs", "nav-tabs"),
    ("pills", "nav-pills"),
    ("fill", "nav-fill"),
    ("justified", "nav-justified"),
    ("centered", "justify-content-center"),
    ("right_aligned", "justify-content-end"),
)

DIRECTION_CLASSES = {
    DROP_ORIENTATION_DOWN: "dropdown",
    DROP_ORIENTATION_UP: "dropup",
    DROP_ORIENTATION_START: "dropstart",
    DROP_ORIENTATION_END: "dropend",
}

SUBLINKS = (
    STYLE_SUBLINK_LINK,
    STYLE_SUBLINK_SPAN,
    STYLE_SUBLINK_BUTTON,
    STYLE_SUBLINK_DETAILS,
)


def get_whitespace(indent: Union[int, str, None]) -> str:
    """An int indent means that many spaces"""
    if indent is None:
        return ""
    if isinstance(indent, int):
        return " " * indent
    return str(indent)


def combine_classes(*classes: Optional[str]) -> str:
    """Joins the non empty classes, keeping the first occurrence of each"""
    seen = []
    for css_class in classes:
        if css_class and css_class not in seen:
            seen.append(css_class)
    return " ".join(seen)


def get_size_class(size: Any, template: str) -> str:
    if size not in SIZES:
        raise ConfigurationError(LOGMSG_ERR_SIZE.format(size))
    return template.format(size)


@dataclass(frozen=True)
class RenderVariant:
    """Structural fragments shared by every node of one render call"""

    list_tag: str = STYLE_UL
    sublist_classes: Tuple[str, ...] = ("dropdown-menu",)
    dropdown_class: str = "dropdown"
    sublink: str = STYLE_SUBLINK_LINK
    toggle_classes: Tuple[str, ...] = ("dropdown-toggle",)
    toggle_attributes: Tuple[Tuple[str, str], ...] = (("data-bs-toggle", "dropdown"),)
    ul_role: Optional[str] = None
    li_role: Optional[str] = None
    link_role: Optional[str] = None

    @property
    def use_details(self) -> bool:
        return self.sublink == STYLE_SUBLINK_DETAILS

    @classmethod
    def build(
        cls,
        style: str,
        direction: str,
        sublink: str,
        dark: bool = False,
        tabs: bool = False,
    ) -> "RenderVariant":
        if sublink == STYLE_SUBLINK_DETAILS:
            sublist_classes = ["dropdown-details-menu"]
        else:
            sublist_classes = ["dropdown-menu"]
        if dark:
            sublist_classes.append("dropdown-menu-dark")

        toggle_classes = []
        toggle_attributes = ()
        if sublink in (STYLE_SUBLINK_BUTTON, STYLE_SUBLINK_DETAILS):
            toggle_classes.append("btn")
        if sublink != STYLE_SUBLINK_DETAILS:
            toggle_classes.append("dropdown-toggle")
            toggle_attributes = (("data-bs-toggle", "dropdown"),)

        return cls(
            list_tag=STYLE_OL if style == STYLE_OL else STYLE_UL,
            sublist_classes=tuple(sublist_classes),
            dropdown_class=DIRECTION_CLASSES.get(direction, "dropdown"),
            sublink=sublink,
            toggle_classes=tuple(toggle_classes),
            toggle_attributes=toggle_attributes,
            ul_role="tablist" if tabs else None,
            li_role="presentation" if tabs else None,
            link_role="tab" if tabs else None,
        )


@dataclass(frozen=True)
class RenderOptions:
    ul_class: str = "nav navigation"
    li_class: str = ""
    li_active_class: str = "active"
    item_class: str = ""
    indent: str = ""
    min_depth: int = 0
    max_depth: Optional[int] = None
    only_active_branch: bool = False
    render_parents: bool = True
    add_class_to_list_item: bool = False
    escape_labels: bool = True
    style: str = STYLE_UL
    direction: str = DROP_ORIENTATION_DOWN
    sublink: str = STYLE_SUBLINK_LINK
    dark: bool = False
    variant: RenderVariant = field(default_factory=RenderVariant)


class RenderPolicy(object):
    """
    Normalizes the options of one render call.

    Options missing from the call take the helper's current defaults
    (``ul_class``, ``li_active_class``, ``indent``, ``min_depth``,
    ``max_depth``, ``only_active_branch``, ``render_parents`` and
    ``add_class_to_list_item`` attributes of ``defaults``).
    """

    def __init__(self, defaults):
        self.defaults = defaults

    def normalize(self, options: Optional[Dict[str, Any]] = None) -> RenderOptions:
        options = dict(options or {})
        unknown = set(options) - RENDER_OPTIONS
        if unknown:
            raise ConfigurationError(
                LOGMSG_ERR_UNKNOWN_OPTION.format(", ".join(sorted(unknown)))
            )
        defaults = self.defaults

        if options.get("indent") is not None:
            indent = get_whitespace(options["indent"])
        else:
            indent = defaults.indent

        if "min_depth" in options:
            min_depth = options["min_depth"]
        else:
            min_depth = defaults.min_depth
        if min_depth is None or int(min_depth) < 0:
            min_depth = 0

        if "max_depth" in options:
            max_depth = options["max_depth"]
        else:
            max_depth = defaults.max_depth
        if max_depth is not None:
            max_depth = int(max_depth)

        vertical = options.get("vertical")
        if vertical is False:
            vertical = None
        direction = options.get("direction")
        if direction is None:
            direction = DROP_ORIENTATION_END if vertical is not None else DROP_ORIENTATION_DOWN
        if direction not in DIRECTION_CLASSES:
            raise ConfigurationError('Direction "{0}" does not exist'.format(direction))

        sublink = options.get("sublink") or STYLE_SUBLINK_LINK
        if sublink not in SUBLINKS:
            raise ConfigurationError('Sublink style "{0}" does not exist'.format(sublink))

        style = options.get("style") or STYLE_UL
        if style not in (STYLE_UL, STYLE_OL):
            raise ConfigurationError('Style "{0}" does not exist'.format(style))

        li_active_class = options.get("li_active_class")
        if li_active_class is None:
            li_active_class = defaults.li_active_class

        tabs = bool(options.get("tabs") or options.get("pills"))
        dark = bool(options.get("dark", False))

        return RenderOptions(
            ul_class=self.normalize_ul_class(options, vertical),
            li_class=str(options.get("li_class") or ""),
            li_active_class=str(li_active_class),
            item_class=self.normalize_item_class(vertical),
            indent=indent,
            min_depth=int(min_depth),
            max_depth=max_depth,
            only_active_branch=bool(
                options.get("only_active_branch", defaults.only_active_branch)
            ),
            render_parents=bool(options.get("render_parents", defaults.render_parents)),
            add_class_to_list_item=bool(
                options.get("add_class_to_list_item", defaults.add_class_to_list_item)
            ),
            escape_labels=bool(options.get("escape_labels", True)),
            style=style,
            direction=direction,
            sublink=sublink,
            dark=dark,
            variant=RenderVariant.build(style, direction, sublink, dark=dark, tabs=tabs),
        )

    def normalize_ul_class(self, options: Dict[str, Any], vertical: Any) -> str:
        ul_classes = ["navbar-nav" if options.get("in_navbar") else "nav"]
        if options.get("ul_class") is not None:
            ul_classes.append(str(options["ul_class"]))
        else:
            ul_classes.append(self.defaults.ul_class)
        for name, css_class in UL_FLAG_CLASSES:
            if options.get(name):
                ul_classes.append(css_class)
        if vertical is not None:
            ul_classes.append("flex-column")
            if vertical is not True:
                ul_classes.append(get_size_class(vertical, "flex-{0}-row"))
        return combine_classes(*ul_classes)

    @staticmethod
    def normalize_item_class(vertical: Any) -> str:
        if vertical is None or vertical is True:
            return ""
        return combine_classes(
            get_size_class(vertical, "flex-{0}-fill"),
            get_size_class(vertical, "text-{0}-center"),
        )
