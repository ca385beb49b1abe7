"""Markdown rendering with TOML frontmatter extraction."""

import logging
import re
import tomllib
from collections.abc import Sequence
from datetime import date, datetime, timezone
from pathlib import Path

from markdown import Markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

from lectern.core.errors import ContentNotFound, FrontmatterError
from lectern.core.models import PageMetadata

logger = logging.getLogger(__name__)

# Opening fence of a code block: ``` or ~~~ with an optional info string
FENCE_OPEN_PATTERN = re.compile(r"^(?P<fence>`{3,}|~{3,})[ \t]*(?P<lang>[\w+-]*)[ \t]*$")


class FrontmatterPreprocessor(Preprocessor):
    """Pull a leading fenced code block out of the document.

    The block must come before any other non-blank line. Its raw text is
    stored on ``md.frontmatter`` and the remaining lines are rendered as usual.
    """

    def run(self, lines: list[str]) -> list[str]:
        start = 0
        while start < len(lines) and not lines[start].strip():
            start += 1
        if start == len(lines):
            return lines

        match = FENCE_OPEN_PATTERN.match(lines[start])
        if match is None:
            return lines

        fence = match.group("fence")
        for end in range(start + 1, len(lines)):
            closing = lines[end].strip()
            if closing.startswith(fence) and closing == fence[0] * len(closing):
                self.md.frontmatter = "\n".join(lines[start + 1 : end])
                return lines[end + 1 :]

        # Unterminated fence: leave it for the code block processor
        return lines


class FrontmatterExtension(Extension):
    """Markdown extension exposing a leading fenced block as ``md.frontmatter``."""

    def extendMarkdown(self, md: Markdown) -> None:
        """Register the frontmatter preprocessor ahead of fenced code handling."""
        self.md = md
        md.registerExtension(self)
        md.frontmatter = None
        md.preprocessors.register(FrontmatterPreprocessor(md), "frontmatter", 28)

    def reset(self) -> None:
        self.md.frontmatter = None


def create_parser(extensions: Sequence[str] = ()) -> Markdown:
    """Create a Markdown parser with the configured extensions.

    Args:
        extensions: Python-Markdown extension names from the settings.

    Returns:
        Configured Markdown parser instance with frontmatter extraction.
    """
    return Markdown(extensions=[*extensions, FrontmatterExtension()])


def parse_frontmatter(raw: str | None, site_title: str) -> PageMetadata:
    """Parse TOML frontmatter, falling back to default metadata.

    Never raises: a missing block or bad TOML is logged and replaced by a
    metadata value carrying only the site title.
    """
    if raw is None:
        logger.warning("No frontmatter found")
        return PageMetadata.default(site_title)

    try:
        return PageMetadata.from_mapping(tomllib.loads(raw))
    except tomllib.TOMLDecodeError as e:
        logger.warning("Error parsing frontmatter: %s", e)
    except FrontmatterError as e:
        logger.warning("%s", e)
    return PageMetadata.default(site_title)


def last_modified(path: Path) -> date:
    """Modification date of a file, or today when it cannot be read."""
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        logger.warning("Could not get last modified date of %s: %s", path, e)
        return datetime.now(timezone.utc).date()
    return datetime.fromtimestamp(mtime, tz=timezone.utc).date()


def render_markdown(
    path: Path,
    site_title: str,
    extensions: Sequence[str] = (),
) -> tuple[PageMetadata, str]:
    """Render a markdown file to HTML.

    Args:
        path: Markdown file on disk.
        site_title: Title used when the frontmatter is missing or invalid.
        extensions: Python-Markdown extension names.

    Returns:
        Tuple of (metadata, html). ``metadata.last_modified`` is always set.

    Raises:
        ContentNotFound: if the file cannot be read.
    """
    logger.debug("Reading %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentNotFound(f"Could not read {path}: {e}") from e

    parser = create_parser(extensions)
    html = parser.convert(text)
    metadata = parse_frontmatter(parser.frontmatter, site_title)

    if metadata.modified is not None:
        metadata.last_modified = metadata.modified.date()
    else:
        metadata.last_modified = last_modified(path)
    return metadata, html
