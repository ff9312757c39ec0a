"""Heading lookup models produced by annotation and consumed by rendering."""

from pydantic import BaseModel, ConfigDict, Field


class HeadingRecord(BaseModel):
    """One heading seen during an annotation pass."""

    model_config = ConfigDict(frozen=True)

    raw_text: str
    normalized_key: str
    id: str
    level: int = Field(ge=1, le=6)
    preexisting: bool = Field(
        default=False,
        description="True when the element already carried its id attribute.",
    )


class HeadingTable(BaseModel):
    """Mapping from normalized heading text to anchor id for one document.

    A table belongs to a single render pass and is discarded afterwards.
    When two headings share a normalized key, the later heading wins the
    mapping while both keep their own ids in the markup.

    Example:
        >>> table = HeadingTable()
        >>> table.record(HeadingRecord(
        ...     raw_text="Setup", normalized_key="setup", id="setup", level=2))
        >>> table.get("setup")
        'setup'
    """

    ids: dict[str, str] = Field(default_factory=dict)
    headings: list[HeadingRecord] = Field(default_factory=list)

    def record(self, heading: HeadingRecord) -> None:
        """Add a heading, overwriting any earlier mapping for its key."""
        self.headings.append(heading)
        self.ids[heading.normalized_key] = heading.id

    def get(self, normalized_key: str) -> str | None:
        """Return the anchor id for a normalized key, or None."""
        return self.ids.get(normalized_key)

    def __contains__(self, normalized_key: object) -> bool:
        return normalized_key in self.ids

    def __len__(self) -> int:
        return len(self.ids)

    @classmethod
    def from_mapping(cls, ids: dict[str, str]) -> "HeadingTable":
        """Build a table directly from a ``key -> id`` mapping.

        Useful for rendering against a table produced elsewhere.
        """
        return cls(ids=dict(ids))


class LinkEntry(BaseModel):
    """One item of the rendered link list."""

    model_config = ConfigDict(frozen=True)

    label: str
    target_id: str | None = None

    @property
    def resolved(self) -> bool:
        """Whether the label matched a heading in the table."""
        return self.target_id is not None

    @property
    def href(self) -> str | None:
        """In-page link target, or None for unresolved labels."""
        if self.target_id is None:
            return None
        return f"#{self.target_id}"
