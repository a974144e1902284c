# ABOUTME: Immutable record of facts extracted from one wiki item page
# ABOUTME: Fixed key set; every value is text, an ordered tuple of text, or None

from pydantic import BaseModel, ConfigDict, Field

RECORD_FIELDS: tuple[str, ...] = (
    "title",
    "plot_summary",
    "characters",
    "locations",
    "author",
    "cover_artist",
    "genre",
    "based_on",
    "publisher",
    "publication_date",
    "pages",
    "preceded_by",
    "followed_by",
    "cover_image_url",
)


class ExtractionRecord(BaseModel):
    """Facts extracted from a single page. Missing facts are None, never empty strings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str | None = Field(None, description="Page title")
    plot_summary: str | None = Field(None, description="Plot summary paragraphs, newline separated")
    characters: tuple[str, ...] | None = Field(None, description="Characters or cast entries")
    locations: tuple[str, ...] | None = Field(None, description="Locations or setting entries")

    # Fact panel fields
    author: str | None = Field(None, description="Author")
    cover_artist: str | None = Field(None, description="Cover artist")
    genre: str | None = Field(None, description="Genre")
    based_on: str | None = Field(None, description="Source work the item is based on")
    publisher: str | None = Field(None, description="Publisher")
    publication_date: str | None = Field(None, description="Publication date as written on the page")
    pages: str | None = Field(None, description="Page count as written on the page")
    preceded_by: str | None = Field(None, description="Previous item in the series")
    followed_by: str | None = Field(None, description="Next item in the series")

    cover_image_url: str | None = Field(None, description="Canonical URL of the representative image")

    @property
    def resolved_fields(self) -> list[str]:
        """Names of fields that carry a value."""
        return [name for name in RECORD_FIELDS if getattr(self, name) is not None]

    @property
    def is_empty(self) -> bool:
        return not self.resolved_fields
