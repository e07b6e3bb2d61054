from unittest.mock import Mock

from flask_navmenu import AcceptHelper, PermissionAuthorization

from tests.base import NavMenuTestCase


class TestAcceptHelper(NavMenuTestCase):
    def setUp(self):
        self.container = self.build_container()

    def page(self, page_id):
        return self.container.find_one_by("id", page_id)

    def test_visible_pages(self):
        accept = AcceptHelper()
        self.assertTrue(accept.accept(self.page("home")))
        self.assertFalse(accept.accept(self.page("hidden")))

    def test_render_invisible(self):
        accept = AcceptHelper(render_invisible=True)
        self.assertTrue(accept.accept(self.page("hidden")))

    def test_authorization_is_asked_for_protected_pages(self):
        authorization = Mock()
        authorization.is_allowed.return_value = False
        accept = AcceptHelper(authorization=authorization, role="guest")
        self.assertTrue(accept.accept(self.page("home")))
        self.assertFalse(accept.accept(self.page("admin")))
        authorization.is_allowed.assert_called_once_with("guest", "admin", None)

    def test_recursive_rejects_children_of_rejected_parents(self):
        authorization = PermissionAuthorization({"editor": {"admin": "*"}})
        guest = AcceptHelper(authorization=authorization, role="guest")
        self.assertFalse(guest.accept(self.page("users")))
        self.assertTrue(guest.accept(self.page("users"), recursive=False))
        editor = AcceptHelper(authorization=authorization, role="editor")
        self.assertTrue(editor.accept(self.page("users")))


class TestPermissionAuthorization(NavMenuTestCase):
    def test_privileges(self):
        authorization = PermissionAuthorization(
            {"admin": {"reports": "*"}, "public": {"reports": ["read"]}}
        )
        self.assertTrue(authorization.is_allowed("admin", "reports", "write"))
        self.assertTrue(authorization.is_allowed("public", "reports", "read"))
        self.assertFalse(authorization.is_allowed("public", "reports", "write"))
        self.assertTrue(authorization.is_allowed("public", "reports", None))
        self.assertFalse(authorization.is_allowed("public", "admin", None))
        self.assertFalse(authorization.is_allowed("nobody", "reports", None))
