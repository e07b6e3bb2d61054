import logging
from typing import Any, Dict, Optional, Union

from flask import current_app
import jinja2

log = logging.getLogger(__name__)


class TemplateRenderer(object):
    """
    Renders partial templates for the helpers.

    Uses the given Jinja2 environment, or the current Flask application's
    one when none was given. A :class:`jinja2.Template` can be passed
    instead of a template name.
    """

    def __init__(self, jinja_env: Optional[jinja2.Environment] = None):
        self.jinja_env = jinja_env

    def get_environment(self) -> jinja2.Environment:
        if self.jinja_env is not None:
            return self.jinja_env
        return current_app.jinja_env

    def render(
        self, template: Union[str, jinja2.Template], data: Dict[str, Any]
    ) -> str:
        if not isinstance(template, jinja2.Template):
            log.debug("Rendering partial %s", template)
            template = self.get_environment().get_template(template)
        return template.render(data)
