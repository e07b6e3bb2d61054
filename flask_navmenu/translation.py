"""
Label and title translators.

A translator is any object with ``translate(message, text_domain, locale=None)``.
"""
from typing import Dict, Optional

from flask_babel import Domain

from .const import DEFAULT_TEXT_DOMAIN


class BabelTranslator(object):
    """
    Translates through Flask-Babel, one :class:`flask_babel.Domain` per
    text domain. The ``default`` text domain is Babel's ``messages``.
    Needs an application context with Flask-Babel initialized.
    """

    def __init__(self, translation_directories: Optional[str] = None):
        self.translation_directories = translation_directories
        self._domains: Dict[str, Domain] = {}

    def get_domain(self, text_domain: Optional[str]) -> Domain:
        name = text_domain or DEFAULT_TEXT_DOMAIN
        if name == DEFAULT_TEXT_DOMAIN:
            name = "messages"
        if name not in self._domains:
            self._domains[name] = Domain(
                translation_directories=self.translation_directories, domain=name
            )
        return self._domains[name]

    def translate(
        self,
        message: str,
        text_domain: Optional[str] = DEFAULT_TEXT_DOMAIN,
        locale: Optional[str] = None,
    ) -> str:
        return str(self.get_domain(text_domain).gettext(message))


class DictTranslator(object):
    """
    Static catalog translator, ``{text_domain: {message: translation}}``.
    Unknown messages are returned untouched.
    """

    def __init__(self, catalog: Optional[Dict[str, Dict[str, str]]] = None):
        self.catalog = catalog or {}

    def translate(
        self,
        message: str,
        text_domain: Optional[str] = DEFAULT_TEXT_DOMAIN,
        locale: Optional[str] = None,
    ) -> str:
        domain = self.catalog.get(text_domain or DEFAULT_TEXT_DOMAIN, {})
        return domain.get(message, message)
