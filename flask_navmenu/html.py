from typing import Any, Dict, Optional

from markupsafe import escape


class Escaper(object):
    """HTML escaping for text content and attribute values"""

    def escape_html(self, text: Any) -> str:
        return str(escape(text))

    def escape_html_attr(self, text: Any) -> str:
        return str(escape(text))


class HtmlElement(object):
    """
    Serializes one element from its tag name, ordered attributes
    and already escaped inner HTML.

    ``None``, ``False`` and empty values are left out, ``True`` renders
    a bare attribute.
    """

    def __init__(self, escaper: Optional[Escaper] = None):
        self.escaper = escaper or Escaper()

    def render(self, element: str, attributes: Dict[str, Any], content: str = "") -> str:
        return "<{0}{1}>{2}</{0}>".format(
            element, self.html_attribs(attributes), content
        )

    def html_attribs(self, attributes: Dict[str, Any]) -> str:
        html = []
        for key, value in attributes.items():
            if value is None or value is False or value == "":
                continue
            key = self.escaper.escape_html(key)
            if value is True:
                html.append(" {0}".format(key))
                continue
            if isinstance(value, (list, tuple)):
                value = " ".join(str(v) for v in value)
            html.append(
                ' {0}="{1}"'.format(key, self.escaper.escape_html_attr(value))
            )
        return "".join(html)
