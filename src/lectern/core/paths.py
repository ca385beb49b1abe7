"""Request path handling: normalization, classification and display names."""

import logging
import re
from pathlib import Path, PurePosixPath

from lectern.core.errors import ContentNotFound
from lectern.core.models import Directory, MarkdownDocument, ResolvedTarget, StaticFile

logger = logging.getLogger(__name__)

# Word boundaries for Title Case: separators, camelCase humps, letter/digit edges
_WORD_BOUNDARY = re.compile(
    r"[\s_\-]+"
    r"|(?<=[a-z])(?=[A-Z])"
    r"|(?<=[A-Z])(?=[A-Z][a-z])"
    r"|(?<=[A-Za-z])(?=\d)"
    r"|(?<=\d)(?=[A-Za-z])"
)

_DIGITS = re.compile(r"(\d+)")


def normalize_path(uri: str) -> str:
    """Strip trailing slashes from a request URI.

    The root path is left alone and the query string is kept verbatim.
    Normalizing an already normalized URI returns it unchanged.
    """
    path, sep, query = uri.partition("?")
    if path == "/" or not (path.endswith("/") or path.startswith("//")):
        return uri
    logger.debug("Trimming trailing slash from %s", uri)
    return "/" + path.strip("/") + sep + query


def is_hidden(name: str) -> bool:
    """Dotfiles are never listed."""
    return name.startswith(".")


def file_root(name: str) -> str:
    """Return the part of a file name before its first dot.

    Names without a dot (or consisting only of a leading dot) are returned whole.
    """
    root, dot, _ = name.partition(".")
    return root if dot and root else name


def title_case(text: str) -> str:
    """Convert ``my-notes`` or ``myNotes`` to ``My Notes``."""
    words = [w for w in _WORD_BOUNDARY.split(text) if w]
    return " ".join(w[:1].upper() + w[1:].lower() for w in words)


def display_name(name: str) -> str:
    """Human readable name for a file or directory name."""
    return title_case(file_root(name))


def natural_sort_key(text: str) -> list[str | int]:
    """Sort key comparing embedded numbers numerically, ignoring case.

    ``re.split`` with a capture group alternates text and digit runs, so
    digit runs always sit at odd indices and compare against each other.
    """
    parts = _DIGITS.split(text.casefold())
    return [int(part) if i % 2 else part for i, part in enumerate(parts)]


def _inside(root: Path, path: Path) -> bool:
    return path == root or path.is_relative_to(root)


def _resolve(path: Path, request_path: str | Path) -> Path:
    try:
        return path.resolve()
    except (OSError, ValueError, RuntimeError) as e:
        logger.warning("Could not resolve %r: %s", str(request_path), e)
        raise ContentNotFound(f"{request_path} cannot be resolved") from e


def resolve_target(root: Path, request_path: str | Path) -> ResolvedTarget:
    """Classify a request path relative to the content root.

    Raises:
        ContentNotFound: if the target does not exist or escapes the root.
    """
    root = root.resolve()
    rel_path = Path(PurePosixPath(str(request_path).lstrip("/")))
    fs_path = _resolve(root / rel_path, request_path)

    if not _inside(root, fs_path):
        logger.warning("Rejected path outside content root: %s", request_path)
        raise ContentNotFound(f"{request_path} is outside the content root")

    if fs_path.is_dir():
        return Directory(rel_path=rel_path, fs_path=fs_path)

    if rel_path == Path("."):
        raise ContentNotFound(f"Content root {root} is not a directory")

    if not rel_path.suffix:
        md_rel = rel_path.with_name(rel_path.name + ".md")
        md_path = _resolve(root / md_rel, request_path)
        if not _inside(root, md_path) or not md_path.is_file():
            raise ContentNotFound(f"No markdown document for {request_path}")
        return MarkdownDocument(rel_path=md_rel, fs_path=md_path)

    if not fs_path.is_file():
        raise ContentNotFound(f"{request_path} does not exist")
    return StaticFile(rel_path=rel_path, fs_path=fs_path)
