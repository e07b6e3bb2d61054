import unittest

from flask_navmenu import ConfigurationError, Menu, RenderPolicy
from flask_navmenu.options import (
    combine_classes,
    get_size_class,
    get_whitespace,
    RenderVariant,
)


class TestHelpers(unittest.TestCase):
    def test_get_whitespace(self):
        self.assertEqual(get_whitespace(4), "    ")
        self.assertEqual(get_whitespace("\t"), "\t")
        self.assertEqual(get_whitespace(None), "")

    def test_combine_classes(self):
        self.assertEqual(combine_classes("a", None, "", "b", "a"), "a b")
        self.assertEqual(combine_classes(), "")

    def test_get_size_class(self):
        self.assertEqual(get_size_class("md", "flex-{0}-row"), "flex-md-row")
        with self.assertRaises(ConfigurationError) as context:
            get_size_class("xy", "flex-{0}-row")
        self.assertEqual(str(context.exception), 'Size "xy" does not exist')


class TestRenderVariant(unittest.TestCase):
    def test_details(self):
        variant = RenderVariant.build("ul", "down", "details", dark=True)
        self.assertTrue(variant.use_details)
        self.assertEqual(variant.sublist_classes, ("dropdown-details-menu", "dropdown-menu-dark"))
        self.assertEqual(variant.toggle_classes, ("btn",))
        self.assertEqual(variant.toggle_attributes, ())

    def test_button_and_tabs(self):
        variant = RenderVariant.build("ol", "up", "button", tabs=True)
        self.assertEqual(variant.list_tag, "ol")
        self.assertEqual(variant.dropdown_class, "dropup")
        self.assertEqual(variant.toggle_classes, ("btn", "dropdown-toggle"))
        self.assertEqual(variant.ul_role, "tablist")
        self.assertEqual(variant.li_role, "presentation")
        self.assertEqual(variant.link_role, "tab")


class TestRenderPolicy(unittest.TestCase):
    def setUp(self):
        self.menu = Menu()
        self.policy = RenderPolicy(self.menu)

    def test_defaults(self):
        options = self.policy.normalize({})
        self.assertEqual(options.ul_class, "nav navigation")
        self.assertEqual(options.li_active_class, "active")
        self.assertEqual(options.direction, "down")
        self.assertEqual(options.min_depth, 0)
        self.assertIsNone(options.max_depth)
        self.assertEqual(options.indent, "")
        self.assertFalse(options.only_active_branch)
        self.assertTrue(options.render_parents)
        self.assertTrue(options.escape_labels)
        self.assertEqual(options.variant, RenderVariant())

    def test_helper_defaults_are_used(self):
        self.menu.ul_class = "main"
        self.menu.indent = 2
        self.menu.min_depth = 1
        self.menu.max_depth = 3
        self.menu.only_active_branch = True
        options = self.policy.normalize({})
        self.assertEqual(options.ul_class, "nav main")
        self.assertEqual(options.indent, "  ")
        self.assertEqual(options.min_depth, 1)
        self.assertEqual(options.max_depth, 3)
        self.assertTrue(options.only_active_branch)

    def test_negative_min_depth(self):
        self.assertEqual(self.policy.normalize({"min_depth": -3}).min_depth, 0)

    def test_ul_flags(self):
        options = self.policy.normalize(
            {"ul_class": "x", "tabs": True, "fill": True, "centered": True, "in_navbar": True}
        )
        self.assertEqual(options.ul_class, "navbar-nav x nav-tabs nav-fill justify-content-center")

    def test_vertical(self):
        options = self.policy.normalize({"vertical": True})
        self.assertEqual(options.ul_class, "nav navigation flex-column")
        self.assertEqual(options.direction, "end")
        self.assertEqual(options.item_class, "")

    def test_vertical_size(self):
        options = self.policy.normalize({"vertical": "md", "direction": "start"})
        self.assertEqual(options.ul_class, "nav navigation flex-column flex-md-row")
        self.assertEqual(options.item_class, "flex-md-fill text-md-center")
        self.assertEqual(options.direction, "start")

    def test_vertical_unknown_size(self):
        with self.assertRaises(ConfigurationError) as context:
            self.policy.normalize({"vertical": "xy"})
        self.assertIn('"xy"', str(context.exception))

    def test_invalid_values(self):
        for options in (
            {"direction": "left"},
            {"sublink": "div"},
            {"style": "dl"},
            {"colour": "red"},
        ):
            with self.assertRaises(ConfigurationError):
                self.policy.normalize(options)
