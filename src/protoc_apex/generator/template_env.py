from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from protoc_apex.errors import TemplateRenderError


def _get_template_env() -> Environment:
    template_dir = Path(__file__).parent.parent / "templates"
    # Generated classes end at the closing brace: keep_trailing_newline stays
    # off so the newline ending each template file is dropped.
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        undefined=StrictUndefined,
    )


def render_template(template_name: str, **context: Any) -> str:
    """Render one of the bundled class templates.

    Any Jinja failure, including a missing template variable, is raised as
    TemplateRenderError.
    """
    try:
        template = _get_template_env().get_template(template_name)
        return template.render(**context)
    except TemplateError as e:
        raise TemplateRenderError(
            f"Failed to render template '{template_name}': {e}"
        ) from e
