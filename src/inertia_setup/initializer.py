"""The Inertia Rails initializer: rendered from a fixed template, written once."""

import os

from inertia_setup.template_renderer import render_template

INITIALIZER_TEMPLATE = "inertia_rails.rb.j2"


def render_initializer() -> str:
    return render_template(INITIALIZER_TEMPLATE)


def ensure_initializer(path: str) -> bool:
    """Write the initializer template to path unless a file is already there.

    Returns:
        True if the file was created, False if it already existed.
    """
    if os.path.exists(path):
        return False

    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_initializer())
    return True
