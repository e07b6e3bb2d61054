STYLE_UL = "ul"
STYLE_OL = "ol"

STYLE_SUBLINK_LINK = "link"
STYLE_SUBLINK_SPAN = "span"
STYLE_SUBLINK_BUTTON = "button"
STYLE_SUBLINK_DETAILS = "details"

DROP_ORIENTATION_DOWN = "down"
DROP_ORIENTATION_UP = "up"
DROP_ORIENTATION_START = "start"
DROP_ORIENTATION_END = "end"

# Bootstrap breakpoints usable with the ``vertical`` option
SIZES = ("sm", "md", "lg", "xl", "xxl")

DEFAULT_UL_CLASS = "navigation"
DEFAULT_LI_ACTIVE_CLASS = "active"
DEFAULT_CONTAINER = "navigation"
DEFAULT_TEXT_DOMAIN = "default"

# Page properties that only matter for sitemaps
SITEMAP_PROPERTIES = ("lastmod", "changefreq", "priority")

LOGMSG_ERR_NO_PARTIAL = "Unable to render {0}: No partial view script provided"
LOGMSG_ERR_PARTIAL_LIST = (
    "Unable to render {0}: A view partial supplied as an array "
    "must contain one value: the partial view script"
)
LOGMSG_ERR_SIZE = 'Size "{0}" does not exist'
LOGMSG_ERR_UNKNOWN_OPTION = "Unknown render option(s): {0}"
LOGMSG_ERR_CONTAINER = "Navigation container {0} is not registered"
LOGMSG_ERR_RENDER = "Error rendering {0}"
