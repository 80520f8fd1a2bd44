"""Render the Jinja2 templates bundled alongside this module."""

from pathlib import Path

import jinja2

_TEMPLATES_DIR = Path(__file__).parent

_environment = jinja2.Environment(
    loader=jinja2.FileSystemLoader(_TEMPLATES_DIR),
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
)


def render_template(template_name: str, **kwargs) -> str:
    """Load a bundled Jinja2 template by name and render it.

    Args:
        template_name: Filename within src/prflow/templates/ (e.g. "pr_body.j2")
        **kwargs: Template variables. Referencing an undefined variable raises.

    Returns:
        The rendered template string.

    Raises:
        FileNotFoundError: If the template file does not exist
    """
    if not (_TEMPLATES_DIR / template_name).is_file():
        raise FileNotFoundError(f"Template not found: {_TEMPLATES_DIR / template_name}")
    return _environment.get_template(template_name).render(**kwargs)
