import unittest

from markupsafe import Markup

from flask_navmenu.html import Escaper, HtmlElement


class TestEscaper(unittest.TestCase):
    def test_escape(self):
        escaper = Escaper()
        self.assertEqual(escaper.escape_html("<b>&</b>"), "&lt;b&gt;&amp;&lt;/b&gt;")
        self.assertEqual(escaper.escape_html_attr('"x"'), "&#34;x&#34;")

    def test_markup_is_not_escaped_twice(self):
        self.assertEqual(Escaper().escape_html(Markup("<b>x</b>")), "<b>x</b>")


class TestHtmlElement(unittest.TestCase):
    def test_render(self):
        html = HtmlElement().render(
            "a",
            {
                "href": "/x?a=1&b=2",
                "hidden": True,
                "title": None,
                "target": "",
                "disabled": False,
                "class": ["one", "two"],
            },
            "X",
        )
        self.assertEqual(html, '<a href="/x?a=1&amp;b=2" hidden class="one two">X</a>')

    def test_empty_element(self):
        self.assertEqual(HtmlElement().render("span", {}), "<span></span>")
