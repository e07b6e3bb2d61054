from typing import Any, Optional

from .navigation import Page


class AcceptHelper(object):
    """
    Decides whether a page may be rendered.

    Rules:

    - an invisible page is rejected unless ``render_invisible`` is set
    - with an ``authorization`` object, a page carrying a resource or a
      privilege is accepted only when
      ``authorization.is_allowed(role, resource, privilege)`` says so
    - with ``recursive``, a page is rejected when its parent page is
    """

    def __init__(
        self,
        authorization: Optional[Any] = None,
        render_invisible: bool = False,
        role: Optional[str] = None,
    ):
        self.authorization = authorization
        self.render_invisible = render_invisible
        self.role = role

    def accept(self, page: Page, recursive: bool = True) -> bool:
        if not self.render_invisible and not page.is_visible(False):
            return False
        if self.authorization is not None and not self.is_allowed(page):
            return False
        if recursive and isinstance(page.parent, Page):
            return self.accept(page.parent, True)
        return True

    def is_allowed(self, page: Page) -> bool:
        resource = page.resource
        privilege = page.privilege
        if not resource and not privilege:
            return True
        return bool(self.authorization.is_allowed(self.role, resource, privilege))


class PermissionAuthorization(object):
    """
    Static permission table usable as ``authorization``.

    ``permissions`` maps a role to the resources it may see, each resource
    mapping to the granted privileges or to ``"*"`` for all of them::

        PermissionAuthorization({"admin": {"reports": "*"},
                                 "public": {"reports": ["read"]}})
    """

    def __init__(self, permissions=None):
        self.permissions = permissions or {}

    def is_allowed(self, role, resource, privilege) -> bool:
        resources = self.permissions.get(role, {})
        if resource and resource not in resources:
            return False
        granted = resources.get(resource, "*") if resource else "*"
        if granted == "*" or privilege is None:
            return True
        return privilege in granted
