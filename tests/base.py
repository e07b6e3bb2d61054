import logging
import unittest

from flask import Flask
from flask_navmenu import Container, Menu

logging.basicConfig(format="%(asctime)s:%(levelname)s:%(name)s:%(message)s")
logging.getLogger().setLevel(logging.DEBUG)
log = logging.getLogger(__name__)


NAVIGATION = [
    {"label": "Home", "id": "home", "href": "/"},
    {
        "label": "Reports",
        "id": "reports",
        "href": "/reports",
        "pages": [
            {
                "label": "Sales",
                "id": "sales",
                "href": "/reports/sales",
                "active": True,
            },
            {"label": "Costs", "id": "costs", "href": "/reports/costs"},
        ],
    },
    {
        "label": "Admin",
        "id": "admin",
        "href": "/admin",
        "resource": "admin",
        "pages": [{"label": "Users", "id": "users", "href": "/admin/users"}],
    },
    {"label": "Hidden", "id": "hidden", "href": "/hidden", "visible": False},
]


# A > B (active) > {C1 > D, C2}, B2 > X, Z
DEEP_NAVIGATION = [
    {
        "label": "A",
        "id": "a",
        "href": "/a",
        "pages": [
            {
                "label": "B",
                "id": "b",
                "href": "/b",
                "active": True,
                "pages": [
                    {
                        "label": "C1",
                        "id": "c1",
                        "href": "/c1",
                        "pages": [{"label": "D", "id": "d", "href": "/d"}],
                    },
                    {"label": "C2", "id": "c2", "href": "/c2"},
                ],
            },
            {
                "label": "B2",
                "id": "b2",
                "href": "/b2",
                "pages": [{"label": "X", "id": "x", "href": "/x"}],
            },
        ],
    },
    {"label": "Z", "id": "z", "href": "/z"},
]


DEFAULT_MENU = (
    '<ul class="nav navigation">\n'
    '    <li class="nav-item">\n'
    '        <a class="nav-link" id="home" href="/">Home</a>\n'
    "    </li>\n"
    '    <li class="nav-item dropdown active">\n'
    '        <a data-bs-toggle="dropdown" aria-expanded="false" role="button"'
    ' aria-current="page" class="nav-link dropdown-toggle" id="reports"'
    ' href="/reports">Reports</a>\n'
    '        <ul class="dropdown-menu" aria-labelledby="reports">\n'
    '            <li class="active">\n'
    '                <a class="dropdown-item" id="sales" href="/reports/sales">Sales</a>\n'
    "            </li>\n"
    "            <li>\n"
    '                <a class="dropdown-item" id="costs" href="/reports/costs">Costs</a>\n'
    "            </li>\n"
    "        </ul>\n"
    "    </li>\n"
    '    <li class="nav-item dropdown">\n'
    '        <a data-bs-toggle="dropdown" aria-expanded="false" role="button"'
    ' class="nav-link dropdown-toggle" id="admin" href="/admin">Admin</a>\n'
    '        <ul class="dropdown-menu" aria-labelledby="admin">\n'
    "            <li>\n"
    '                <a class="dropdown-item" id="users" href="/admin/users">Users</a>\n'
    "            </li>\n"
    "        </ul>\n"
    "    </li>\n"
    "</ul>"
)


class NavMenuTestCase(unittest.TestCase):
    """Shared fixtures: the reference navigation tree and a Flask app"""

    @staticmethod
    def build_container(pages=None):
        return Container.from_list(pages or NAVIGATION)

    @staticmethod
    def create_app(**config):
        app = Flask(__name__)
        app.config["TESTING"] = True
        app.config["NAVMENU_CONTAINERS"] = {"navigation": NAVIGATION}
        app.config.update(config)
        return app

    def build_menu(self, **kwargs):
        menu = Menu(**kwargs)
        menu.set_container(self.build_container())
        return menu

    def clear_active(self, container):
        container.find_one_by("id", "sales").active = False
