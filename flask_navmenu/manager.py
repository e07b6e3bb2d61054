"""
Flask integration: builds configured helpers from the application config.
"""
import logging
from typing import Any, Dict, Optional

from flask import current_app, Flask

from .breadcrumbs import Breadcrumbs
from .const import DEFAULT_CONTAINER
from .container import ContainerParser
from .menu import Menu
from .templating import TemplateRenderer
from .translation import BabelTranslator

log = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "NAVMENU_UL_CLASS": "navigation",
    "NAVMENU_LI_ACTIVE_CLASS": "active",
    "NAVMENU_INDENT": "",
    "NAVMENU_MIN_DEPTH": None,
    "NAVMENU_MAX_DEPTH": None,
    "NAVMENU_ONLY_ACTIVE_BRANCH": False,
    "NAVMENU_RENDER_PARENTS": True,
    "NAVMENU_ADD_CLASS_TO_LIST_ITEM": False,
    "NAVMENU_RENDER_INVISIBLE": False,
    "NAVMENU_DEFAULT_ROLE": None,
    "NAVMENU_PARTIAL": None,
    "NAVMENU_TRANSLATE": True,
    "NAVMENU_CONTAINERS": {},
}


class NavMenu(object):
    """
    Flask extension holding the navigation containers of an application.

    Usage::

        navmenu = NavMenu(app)
        navmenu.add_container("navigation", [{"label": "Home", "href": "/"}])

    and in templates::

        {{ navmenu("navigation").render_menu(max_depth=1) }}
        {{ navbreadcrumbs("navigation") }}
    """

    def __init__(self, app: Optional[Flask] = None, acl: Optional[Any] = None):
        """
        Initialize the extension.

        Args:
            app: Flask application, or None to call ``init_app`` later
            acl: Default authorization object given to every helper
        """
        self.app = None
        self.acl = acl
        self.container_parser = ContainerParser()
        self.translator = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        for key, value in DEFAULT_CONFIG.items():
            app.config.setdefault(key, value)
        for name, pages in app.config["NAVMENU_CONTAINERS"].items():
            self.add_container(name, pages)
        if app.config["NAVMENU_TRANSLATE"] and "babel" in app.extensions:
            self.translator = BabelTranslator()
        app.extensions["navmenu"] = self
        app.add_template_global(self.menu, "navmenu")
        app.add_template_global(self.breadcrumbs, "navbreadcrumbs")
        self.app = app
        log.debug(
            "NavMenu initialized with containers: %s",
            ", ".join(sorted(self.container_parser.containers)),
        )

    def add_container(self, name: str, container):
        """
        Registers a container (or a list of page dicts) under a name
        """
        return self.container_parser.register(name, container)

    @property
    def containers(self) -> Dict[str, Any]:
        return self.container_parser.containers

    def get_config(self) -> Dict[str, Any]:
        app = self.app or current_app
        return app.config

    def configure(self, helper):
        config = self.get_config()
        helper.indent = config["NAVMENU_INDENT"]
        helper.min_depth = config["NAVMENU_MIN_DEPTH"]
        helper.max_depth = config["NAVMENU_MAX_DEPTH"]
        helper.render_invisible = config["NAVMENU_RENDER_INVISIBLE"]
        helper.partial = config["NAVMENU_PARTIAL"]
        return helper

    def create_helper(self, helper_class):
        config = self.get_config()
        helper = helper_class(
            container_parser=self.container_parser,
            template_renderer=TemplateRenderer(),
            translator=self.translator,
            acl=self.acl,
            role=config["NAVMENU_DEFAULT_ROLE"],
        )
        helper.container = self.containers.get(DEFAULT_CONTAINER)
        return helper

    def menu(self, container=None) -> Menu:
        """Returns a menu helper configured from the application config"""
        config = self.get_config()
        helper = self.configure(self.create_helper(Menu))
        helper.ul_class = config["NAVMENU_UL_CLASS"]
        helper.li_active_class = config["NAVMENU_LI_ACTIVE_CLASS"]
        helper.only_active_branch = config["NAVMENU_ONLY_ACTIVE_BRANCH"]
        helper.render_parents = config["NAVMENU_RENDER_PARENTS"]
        helper.add_class_to_list_item = config["NAVMENU_ADD_CLASS_TO_LIST_ITEM"]
        return helper(container)

    def breadcrumbs(self, container=None) -> Breadcrumbs:
        """Returns a breadcrumbs helper configured from the application config"""
        helper = self.configure(self.create_helper(Breadcrumbs))
        # the menu partial does not apply to breadcrumbs
        helper.partial = None
        return helper(container)
