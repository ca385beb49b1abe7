"""Error types raised while resolving and rendering content."""


class LecternError(Exception):
    """Base class for errors that end up as an error page."""

    status_code = 500


class ContentNotFound(LecternError):
    """The requested entry is missing, unreadable or outside the content root."""

    status_code = 404


class FrontmatterError(LecternError):
    """Frontmatter could not be parsed into page metadata."""


class CalendarError(LecternError):
    """The date of Easter could not be computed for a year."""


class TemplateRenderError(LecternError):
    """A Jinja2 template failed to render."""
