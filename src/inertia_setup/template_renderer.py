"""Load and render Jinja2 templates bundled with inertia_setup."""

from pathlib import Path

import jinja2

_TEMPLATES_DIR = Path(__file__).parent / "templates"

_environment = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATES_DIR)),
    keep_trailing_newline=True,
)


def render_template(template_name: str, **kwargs) -> str:
    """Load a Jinja2 template by name and render it with the given arguments.

    Args:
        template_name: Filename within src/inertia_setup/templates/
        **kwargs: Template variables.

    Returns:
        The rendered template string.

    Raises:
        jinja2.TemplateNotFound: If the template file does not exist
    """
    return _environment.get_template(template_name).render(**kwargs)
