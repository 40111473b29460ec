"""
Jinja2 loader for the advisory system-context templates.

Every skill's context template includes the shared "_case" partial, so a
missing partial is caught at import together with the named templates.
Rendering is strict: a variable the builder forgot to pass is an error,
not a blank line in the model's instructions.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterator

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from .templates import Template

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
TEMPLATE_SUFFIX = ".jinja2"
PARTIALS = ("_case",)


def _declared_templates() -> Iterator[str]:
    for attr in vars(Template):
        if attr.isupper():
            yield getattr(Template, attr)
    yield from PARTIALS


def _validate_templates():
    """Fails fast at import if a declared template or partial has no file."""
    missing = [
        name for name in _declared_templates()
        if not (TEMPLATES_DIR / f"{name}{TEMPLATE_SUFFIX}").exists()
    ]
    if missing:
        raise FileNotFoundError(f"Templates missing from {TEMPLATES_DIR}: {', '.join(missing)}")


_validate_templates()


@lru_cache(maxsize=1)
def _get_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(default=False),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render(template_name: str, **context) -> str:
    """
    Render a system-context template.

    Args:
        template_name: One of the Template constants
        **context: Prompt, exhibit and history values the template reads

    Returns:
        The rendered text with surrounding whitespace stripped
    """
    template = _get_environment().get_template(f"{template_name}{TEMPLATE_SUFFIX}")
    try:
        return template.render(**context).strip()
    except TemplateError:
        logger.error(f"Failed to render template '{template_name}'")
        raise
