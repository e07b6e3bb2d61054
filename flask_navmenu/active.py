import logging
from typing import Iterator, List, NamedTuple, Optional, Tuple

from .accept import AcceptHelper
from .navigation import AbstractContainer, Page

log = logging.getLogger(__name__)


class ActivePage(NamedTuple):
    page: Page
    depth: int


def iterate_pages(
    container: AbstractContainer, max_depth: Optional[int] = None, depth: int = 0
) -> Iterator[Tuple[Page, int]]:
    """Walks the tree parents first, yielding ``(page, depth)``"""
    for page in container:
        yield page, depth
        if max_depth is None or depth < max_depth:
            yield from iterate_pages(page, max_depth, depth + 1)


class FindActive(object):
    """Finds the deepest accepted active page of a container"""

    def __init__(self, accept_helper: AcceptHelper):
        self.accept_helper = accept_helper

    def find(
        self,
        container: AbstractContainer,
        min_depth: Optional[int] = None,
        max_depth: Optional[int] = None,
    ) -> Optional[ActivePage]:
        if min_depth is None:
            min_depth = 0
        found, found_depth = None, -1
        for page, depth in iterate_pages(container):
            if depth < min_depth or not self.accept_helper.accept(page):
                continue
            if page.is_active(False) and depth > found_depth:
                found, found_depth = page, depth

        if found is not None and max_depth is not None:
            # walk up until the page is shallow enough
            while found_depth > max_depth:
                found_depth -= 1
                if found_depth < min_depth:
                    return None
                found = found.parent
                if not isinstance(found, Page):
                    return None

        if found is None:
            return None
        return ActivePage(found, found_depth)


class ActiveBranchResolver(object):
    """
    Computes the active page of a container and the branch leading to it.
    """

    def __init__(self, finder: FindActive):
        self.finder = finder

    def find_active(
        self,
        container: AbstractContainer,
        min_depth: Optional[int] = None,
        max_depth: Optional[int] = None,
    ) -> Optional[ActivePage]:
        active = self.finder.find(container, min_depth, max_depth)
        if active is None:
            log.debug("No active page found in %r", container)
        else:
            log.debug("Active page %r found at depth %s", active.page, active.depth)
        return active

    @staticmethod
    def build_branch(
        active_page: Page,
        render_parents: bool = True,
        root: Optional[AbstractContainer] = None,
    ) -> List[Page]:
        """
        Returns the pages from the top of the tree down to ``active_page``.

        :param active_page: last page of the branch
        :param render_parents: when False only ``active_page`` is returned
        :param root: stop climbing once this container is reached
        """
        branch = [active_page]
        if not render_parents:
            return branch
        page = active_page
        while isinstance(page.parent, Page):
            if page.parent is root:
                branch.append(page.parent)
                break
            page = page.parent
            branch.append(page)
        branch.reverse()
        return branch
