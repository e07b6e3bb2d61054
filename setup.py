import io
import os
import re

from setuptools import find_packages, setup


with io.open("flask_navmenu/__init__.py", "rt", encoding="utf8") as f:
    version = re.search(r"__version__ = \"(.*?)\"", f.read()).group(1)


def fpath(name):
    return os.path.join(os.path.dirname(__file__), name)


def read(fname):
    return open(fpath(fname)).read()


def desc():
    return read("README.rst")


setup(
    name="Flask-NavMenu",
    version=version,
    license="BSD",
    description=(
        "Bootstrap navigation menus and breadcrumbs for Flask,"
        " rendered from page trees with visibility and ACL filtering."
    ),
    long_description=desc(),
    long_description_content_type="text/x-rst",
    packages=find_packages(exclude=["tests*"]),
    entry_points={
        "flask.commands": ["navmenu=flask_navmenu.cli:navmenu"],
    },
    include_package_data=True,
    zip_safe=False,
    platforms="any",
    install_requires=[
        "click>=8, <9",
        "Flask>=2.2, <4",
        "Flask-Babel>=3, <5",
        "Jinja2>=3, <4",
        "MarkupSafe>=2, <4",
    ],
    extras_require={
        "testing": ["Babel>=2.12", "pytest>=7"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Web Environment",
        "Framework :: Flask",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.9",
)
