import unittest

from flask_navmenu import Container, Page

from tests.base import NavMenuTestCase


class TestPage(unittest.TestCase):
    def test_factory_aliases(self):
        page = Page.factory(
            {"label": "Home", "uri": "/", "class": "main", "textDomain": "site"}
        )
        self.assertEqual(page.href, "/")
        self.assertEqual(page.css_class, "main")
        self.assertEqual(page.text_domain, "site")
        self.assertEqual(page.get("class"), "main")

    def test_custom_properties(self):
        page = Page(label="Home", **{"data-test": "x", "li-class": "extra"})
        self.assertEqual(page.get("data-test"), "x")
        self.assertEqual(page.get("li-class"), "extra")
        self.assertEqual(page.custom_properties, {"data-test": "x", "li-class": "extra"})
        page.set("rel", "nofollow")
        page.set("class", "link")
        self.assertEqual(page.get("rel"), "nofollow")
        self.assertEqual(page.css_class, "link")
        self.assertIsNone(page.get("missing"))

    def test_nested_pages_have_parents(self):
        page = Page.factory({"label": "A", "pages": [{"label": "B"}]})
        child = list(page)[0]
        self.assertIs(child.parent, page)
        self.assertTrue(page.has_page(child))

    def test_add_page_moves_from_old_parent(self):
        first = Page(label="first")
        second = Page(label="second")
        child = first.add_page({"label": "child"})
        second.add_page(child)
        self.assertFalse(first.has_page(child))
        self.assertIs(child.parent, second)
        self.assertEqual(len(second), 1)

    def test_remove_page(self):
        page = Page(label="A")
        child = page.add_page(Page(label="B"))
        self.assertTrue(page.remove_page(child))
        self.assertIsNone(child.parent)
        self.assertFalse(page.remove_page(child))

    def test_is_active_recursive(self):
        page = Page.factory(
            {"label": "A", "pages": [{"label": "B", "pages": [{"label": "C", "active": True}]}]}
        )
        self.assertFalse(page.is_active())
        self.assertTrue(page.is_active(True))

    def test_is_visible_recursive(self):
        page = Page.factory({"label": "A", "visible": False, "pages": [{"label": "B"}]})
        child = list(page)[0]
        self.assertTrue(child.is_visible())
        self.assertFalse(child.is_visible(True))

    def test_has_pages_only_visible(self):
        page = Page.factory({"label": "A", "pages": [{"label": "B", "visible": False}]})
        self.assertTrue(page.has_pages())
        self.assertFalse(page.has_pages(True))


class TestContainer(NavMenuTestCase):
    def test_from_list(self):
        container = self.build_container()
        self.assertEqual(len(container), 4)
        self.assertEqual([page.id for page in container], ["home", "reports", "admin", "hidden"])
        for page in container:
            self.assertIs(page.parent, container)

    def test_empty_container_is_truthy(self):
        self.assertTrue(Container())

    def test_find_one_by(self):
        container = self.build_container()
        sales = container.find_one_by("id", "sales")
        self.assertEqual(sales.label, "Sales")
        self.assertIsNone(container.find_one_by("id", "nope"))

    def test_has_page_recursive(self):
        container = self.build_container()
        sales = container.find_one_by("id", "sales")
        self.assertFalse(container.has_page(sales))
        self.assertTrue(container.has_page(sales, recursive=True))
