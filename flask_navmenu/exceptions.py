class NavMenuException(Exception):
    """Base class for every error raised by Flask-NavMenu"""


class ConfigurationError(NavMenuException, ValueError):
    """
    Raised when a helper is misconfigured: an unknown render option,
    an unsupported ``vertical`` breakpoint or a missing/malformed partial.
    """


class InvalidContainerError(NavMenuException, LookupError):
    """Raised when a container reference can not be resolved"""
