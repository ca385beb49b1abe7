"""Directory listings and the navigation sidebar."""

import logging
import os
from datetime import date
from pathlib import Path
from urllib.parse import quote

from markupsafe import escape

from lectern.core.errors import ContentNotFound, LecternError, TemplateRenderError
from lectern.core.models import DirectoryEntryView, NavEntry
from lectern.core.parser import last_modified
from lectern.core.paths import display_name, file_root, is_hidden, natural_sort_key
from lectern.core.templating import render_template

logger = logging.getLogger(__name__)

IMAGE_SUFFIX = ".webp"


def is_shown(entry: os.DirEntry) -> bool:
    """Listings show visible directories and markdown files only."""
    if is_hidden(entry.name):
        return False
    return entry.is_dir() or entry.name.endswith(".md")


def entry_view(root: Path, rel_dir: Path, entry: os.DirEntry) -> DirectoryEntryView:
    """Build the listing view of one directory entry.

    Looks for a sibling ``<name>.webp`` image and, when there is one, an
    optional ``.<name>`` caption file next to it.

    Raises:
        UnicodeEncodeError: if the entry name is not valid UTF-8.
    """
    entry.name.encode("utf-8")
    entry_path = rel_dir / entry.name
    view = DirectoryEntryView(display_name=display_name(entry.name), entry_path=entry_path)

    image_path = entry_path.with_suffix(IMAGE_SUFFIX)
    if not (root / image_path).is_file():
        logger.debug("Could not find %s", image_path)
        return view

    view.image_path = image_path
    caption_path = root / rel_dir / f".{file_root(entry.name)}"
    try:
        view.caption = caption_path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("No caption for %s: %s", entry_path, e)
        view.caption = ""
    return view


def list_entries(root: Path, rel_dir: Path) -> list[DirectoryEntryView]:
    """Visible entries of a directory in natural order.

    Raises:
        ContentNotFound: if the directory cannot be enumerated.
    """
    views = []
    try:
        with os.scandir(root / rel_dir) as it:
            for entry in it:
                try:
                    if is_shown(entry):
                        views.append(entry_view(root, rel_dir, entry))
                except (OSError, UnicodeError) as e:
                    logger.warning("Skipping %r in %s: %s", entry.name, rel_dir, e)
    except OSError as e:
        raise ContentNotFound(f"Could not read directory {rel_dir}: {e}") from e

    views.sort(key=lambda v: natural_sort_key(v.display_name))
    return views


def format_link(view: DirectoryEntryView) -> str:
    """Plain text link for an entry without a picture."""
    return f'<li><a href="{view.link}">{escape(view.display_name)}</a></li>'


def build_listing(root: Path, rel_dir: Path, site_title: str) -> tuple[str, date, str]:
    """Render a directory listing.

    Entries with a sibling image come first as picture-grid tiles, followed
    by plain links. Both groups keep natural order. A tile that fails to
    render is shown as a plain link instead.

    Args:
        root: Content root.
        rel_dir: Directory relative to the content root.
        site_title: Title used for the root directory.

    Returns:
        Tuple of (title, last_modified, html).

    Raises:
        ContentNotFound: if the directory cannot be enumerated.
        TemplateRenderError: if the listing template fails.
    """
    logger.debug("Serving directory %s", rel_dir)
    tiles: list[str] = []
    links: list[str] = []
    for view in list_entries(root, rel_dir):
        if view.image_path is not None:
            try:
                tiles.append(render_template("pic_grid.html", entry=view))
                continue
            except TemplateRenderError as e:
                logger.warning("Could not render tile for %s: %s", view.entry_path, e)
        links.append(format_link(view))

    title = site_title if rel_dir == Path(".") else display_name(rel_dir.name)
    html = render_template(
        "listing.html",
        listing_id=rel_dir.as_posix(),
        title=title,
        tiles=tiles,
        links=links,
    )
    return title, last_modified(root / rel_dir), html


def build_nav(root: Path) -> list[NavEntry]:
    """Navigation links to the visible top-level directories.

    Raises:
        LecternError: if the content root cannot be enumerated.
    """
    entries = []
    try:
        with os.scandir(root) as it:
            for entry in it:
                if is_hidden(entry.name):
                    continue
                try:
                    if entry.is_dir():
                        entries.append(
                            NavEntry(
                                display_name=display_name(entry.name),
                                path=quote(f"/{entry.name}"),
                            )
                        )
                except (OSError, UnicodeError) as e:
                    logger.warning("Skipping %r in nav: %s", entry.name, e)
    except OSError as e:
        raise LecternError(f"Failed to build nav: {e}") from e

    entries.sort(key=lambda e: natural_sort_key(e.display_name))
    return [NavEntry(display_name="Home", path="/"), *entries]
