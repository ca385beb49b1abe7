"""Full page assembly around rendered content."""

import logging
from datetime import date, datetime, timezone
from pathlib import Path

from lectern.config import Settings
from lectern.core.errors import LecternError
from lectern.core.lectionary import build_year, day_for
from lectern.core.listing import build_listing, build_nav
from lectern.core.models import Directory, MarkdownDocument, NavEntry, PageView
from lectern.core.parser import render_markdown
from lectern.core.templating import render_template

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "This page doesn't exist!"

# Served when even the error page cannot be rendered
FALLBACK_ERROR_PAGE = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>Error</title></head>
<body><h1 style="text-align:center;">Something went wrong!</h1></body>
</html>
"""


def today() -> date:
    return datetime.now(timezone.utc).date()


def assemble_page(
    root: Path,
    *,
    title: str,
    last_modified: date,
    content: str,
    tags: list[str] | None = None,
    nav: list[NavEntry] | None = None,
    created: date | None = None,
) -> str:
    """Wrap rendered content in the site layout.

    Raises:
        LecternError: if the nav cannot be built.
        TemplateRenderError: if the page template fails.
    """
    if nav is None:
        nav = build_nav(root)
    page = PageView(
        title=title,
        last_modified=last_modified,
        content=content,
        nav=nav,
        tags=tags,
        created=created,
    )
    return render_template("page.html", page=page)


def render_error_page(root: Path, site_title: str, message: str = NOT_FOUND_MESSAGE) -> str:
    """Render an error page, falling back to static HTML if that fails too."""
    try:
        try:
            nav = build_nav(root)
        except LecternError as e:
            logger.warning("Rendering error page without nav: %s", e)
            nav = []
        content = render_template("error.html", message=message)
        return assemble_page(
            root,
            title=site_title,
            last_modified=today(),
            content=content,
            nav=nav,
        )
    except Exception:
        logger.exception("Failed to render error page")
        return FALLBACK_ERROR_PAGE


def render_document(settings: Settings, target: MarkdownDocument) -> str:
    """Render a markdown document as a full page."""
    logger.debug("Serving markdown for %s", target.rel_path)
    metadata, content = render_markdown(
        target.fs_path,
        settings.site_title,
        settings.markdown_extensions,
    )
    return assemble_page(
        settings.root,
        title=metadata.title,
        last_modified=metadata.last_modified or today(),
        content=content,
        tags=metadata.tags,
        created=metadata.created.date() if metadata.created else None,
    )


def render_directory(settings: Settings, target: Directory) -> str:
    """Render a directory listing as a full page."""
    title, last_modified, content = build_listing(
        settings.root, target.rel_path, settings.site_title
    )
    return assemble_page(
        settings.root,
        title=title,
        last_modified=last_modified,
        content=content,
    )


def render_lectionary(settings: Settings, when: date | None = None) -> str:
    """Render the reading calendar for the year of ``when`` (default today).

    Raises:
        CalendarError: if the calendar cannot be built.
    """
    when = when or today()
    year_days = build_year(when.year)
    content = render_template(
        "lectionary.html",
        year=when.year,
        today=day_for(year_days, when),
        days=year_days,
    )
    return assemble_page(
        settings.root,
        title="Lectionary",
        last_modified=when,
        content=content,
        tags=["lectionary", "bible"],
    )
