"""Jinja2 environment for the console templates that ship beside this module."""

import os

import jinja2

_environment = jinja2.Environment(
    loader=jinja2.FileSystemLoader(os.path.dirname(__file__)),
    undefined=jinja2.StrictUndefined,
    autoescape=False,
)


def render_template(template_name: str, **kwargs) -> str:
    """Render a template from this directory.

    Raises:
        jinja2.TemplateNotFound: If no such template ships with the package.
        jinja2.UndefinedError: If the template uses a variable not passed in.
    """
    return _environment.get_template(template_name).render(**kwargs)
