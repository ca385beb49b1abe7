"""Data models for Lectern."""

from collections.abc import Mapping
from datetime import date, datetime
from pathlib import Path
from typing import Literal
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from lectern.core.errors import FrontmatterError


class PageMetadata(BaseModel):
    """Metadata extracted from page frontmatter."""

    model_config = ConfigDict(extra="ignore")

    title: str
    tags: list[str] | None = None
    created: datetime | None = None
    modified: datetime | None = None
    last_modified: date | None = None

    @classmethod
    def default(cls, site_title: str) -> "PageMetadata":
        """Metadata used when a page has no usable frontmatter."""
        return cls(title=site_title)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "PageMetadata":
        """Build metadata from parsed frontmatter, checking required keys.

        Raises:
            FrontmatterError: if ``title`` is missing or a value has the wrong type.
        """
        if "title" not in data:
            raise FrontmatterError("frontmatter is missing required key 'title'")
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise FrontmatterError(f"invalid frontmatter: {e}") from e


class _Target(BaseModel):
    model_config = ConfigDict(frozen=True)

    rel_path: Path
    fs_path: Path


class Directory(_Target):
    """A directory to be rendered as a listing."""

    kind: Literal["directory"] = "directory"


class MarkdownDocument(_Target):
    """A markdown source file to be rendered as a page."""

    kind: Literal["markdown"] = "markdown"


class StaticFile(_Target):
    """Any other file, streamed verbatim."""

    kind: Literal["static"] = "static"


ResolvedTarget = Directory | MarkdownDocument | StaticFile


class DirectoryEntryView(BaseModel):
    """A single entry of a directory listing."""

    display_name: str
    entry_path: Path
    image_path: Path | None = None
    caption: str | None = None

    @property
    def link(self) -> str:
        """Site-absolute link to the entry with its extension stripped."""
        return quote("/" + self.entry_path.with_suffix("").as_posix())

    @property
    def image_src(self) -> str | None:
        if self.image_path is None:
            return None
        return quote("/" + self.image_path.as_posix())


class NavEntry(BaseModel):
    """A link in the navigation sidebar."""

    display_name: str
    path: str


class LiturgicalDay(BaseModel):
    """One row of the reading calendar."""

    model_config = ConfigDict(frozen=True)

    day: date | None = None
    ordinal: int | None = None
    morning: tuple[str, str, str]
    evening: tuple[str, str, str]
    description: str | None = None


class PageView(BaseModel):
    """View model handed to the page template."""

    title: str
    last_modified: date
    content: str
    nav: list[NavEntry] = Field(default_factory=list)
    tags: list[str] | None = None
    created: date | None = None
