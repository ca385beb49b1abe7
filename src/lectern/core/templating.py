"""Jinja2 template rendering."""

import logging
from pathlib import Path
from typing import Any

from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from lectern.core.errors import TemplateRenderError

logger = logging.getLogger(__name__)

templates_path = Path(__file__).parent.parent / "templates"

templates = Jinja2Templates(directory=str(templates_path))


def render_template(name: str, **context: Any) -> str:
    """Render a template to a string.

    Raises:
        TemplateRenderError: if the template is missing or fails to render.
    """
    try:
        return templates.get_template(name).render(**context)
    except (TemplateError, TypeError, ValueError) as e:
        raise TemplateRenderError(f"Failed to render {name}: {e}") from e
