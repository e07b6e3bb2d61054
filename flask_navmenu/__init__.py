__version__ = "1.0.0"

from .accept import AcceptHelper, PermissionAuthorization  # noqa: F401
from .active import ActiveBranchResolver, ActivePage, FindActive  # noqa: F401
from .breadcrumbs import Breadcrumbs  # noqa: F401
from .container import ContainerParser  # noqa: F401
from .exceptions import (  # noqa: F401
    ConfigurationError,
    InvalidContainerError,
    NavMenuException,
)
from .manager import NavMenu  # noqa: F401
from .menu import Menu  # noqa: F401
from .navigation import Container, Page  # noqa: F401
from .options import RenderOptions, RenderPolicy  # noqa: F401
from .translation import BabelTranslator, DictTranslator  # noqa: F401
