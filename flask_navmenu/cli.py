import click
from flask import current_app
from flask.cli import AppGroup, with_appcontext

from .exceptions import NavMenuException

navmenu = AppGroup("navmenu", help="Flask-NavMenu commands")


def get_extension():
    try:
        return current_app.extensions["navmenu"]
    except KeyError:
        raise click.ClickException("NavMenu is not initialized on this application")


def echo_header(title):
    click.echo(click.style(title, fg="green"))
    click.echo(click.style("-" * len(title), fg="green"))


@navmenu.command("list")
@with_appcontext
def list_containers():
    """
    List the registered navigation containers
    """
    extension = get_extension()
    echo_header("Navigation containers")
    for name, container in sorted(extension.containers.items()):
        click.echo("{0}: {1} top level page(s)".format(name, len(container)))


@navmenu.command("render")
@click.argument("container", default="navigation")
@click.option("--max-depth", type=int, default=None, help="Deepest level to render")
@click.option("--min-depth", type=int, default=None, help="First level to render")
@click.option("--only-active-branch", is_flag=True, help="Render the active branch only")
@click.option("--style", type=click.Choice(["ul", "ol"]), default="ul")
@click.option(
    "--sublink",
    type=click.Choice(["link", "span", "button", "details"]),
    default="link",
)
@click.option(
    "--direction",
    type=click.Choice(["down", "up", "start", "end"]),
    default=None,
)
@with_appcontext
def render(container, max_depth, min_depth, only_active_branch, style, sublink, direction):
    """
    Render the menu of a navigation container
    """
    menu = get_extension().menu()
    options = dict(style=style, sublink=sublink, direction=direction)
    if max_depth is not None:
        options["max_depth"] = max_depth
    if min_depth is not None:
        options["min_depth"] = min_depth
    if only_active_branch:
        options["only_active_branch"] = True
    try:
        click.echo(menu.render_menu(container, **options))
    except NavMenuException as e:
        raise click.ClickException(str(e))
