import logging
from typing import Dict, Optional, Union

from .const import DEFAULT_CONTAINER, LOGMSG_ERR_CONTAINER
from .exceptions import InvalidContainerError
from .navigation import AbstractContainer, Container

log = logging.getLogger(__name__)


class ContainerParser(object):
    """
    Resolves the container argument given to a helper.

    ``None`` stays ``None`` (the helper falls back to its own container),
    containers and pages are returned as they are and strings are looked
    up in the registry. ``"default"`` is an alias of ``"navigation"``.
    """

    def __init__(self, containers: Optional[Dict[str, AbstractContainer]] = None):
        self.containers: Dict[str, AbstractContainer] = dict(containers or {})

    def register(self, name: str, container) -> AbstractContainer:
        if isinstance(container, (list, tuple)):
            container = Container.from_list(list(container))
        self.containers[name] = container
        return container

    def parse(
        self, container: Union[AbstractContainer, str, None]
    ) -> Optional[AbstractContainer]:
        if container is None or isinstance(container, AbstractContainer):
            return container
        if isinstance(container, str):
            name = DEFAULT_CONTAINER if container == "default" else container
            try:
                resolved = self.containers[name]
            except KeyError:
                raise InvalidContainerError(LOGMSG_ERR_CONTAINER.format(name))
            log.debug("Resolved navigation container %s", name)
            return resolved
        raise InvalidContainerError(
            "Container must be a string alias or a container instance, "
            "got {0}".format(type(container).__name__)
        )
