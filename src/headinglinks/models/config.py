"""Link list configuration model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from headinglinks.config.defaults import (
    DEFAULT_CONTAINER_CLASS,
    DEFAULT_DIRECTIVE_TAG,
    DEFAULT_HEADING_LEVELS,
    DEFAULT_LIST_TITLE,
    DEFAULT_REPEATER_FIELD_NAME,
    DEFAULT_SUBFIELD_NAME,
    DEFAULT_TITLE_CLASS,
    DEFAULT_UNRESOLVED_CLASS,
    DEFAULT_UNRESOLVED_SUFFIX,
)


def parse_heading_levels(value: Any) -> list[int]:
    """Parse heading levels from a list, a range string or a comma list.

    Accepted forms: ``[2, 3, 4]``, ``"2-6"``, ``"h2-h6"``, ``"2,3,5"``.

    Args:
        value: Raw heading levels value

    Returns:
        Sorted, de-duplicated list of levels

    Raises:
        ValueError: If a level is not an integer between 1 and 6
    """
    if isinstance(value, str):
        levels: list[int] = []
        for part in value.replace(" ", "").lower().split(","):
            if not part:
                continue
            if "-" in part:
                start, _, end = part.partition("-")
                first, last = int(start.lstrip("h")), int(end.lstrip("h"))
                if first > last:
                    raise ValueError(f"Invalid heading level range '{part}'")
                levels.extend(range(first, last + 1))
            else:
                levels.append(int(part.lstrip("h")))
    elif isinstance(value, int) and not isinstance(value, bool):
        levels = [value]
    elif isinstance(value, list | tuple | set | frozenset):
        levels = [int(item) for item in value]
    else:
        raise ValueError(f"Unsupported heading levels value: {value!r}")

    for level in levels:
        if level < 1 or level > 6:
            raise ValueError(f"Heading level must be between 1 and 6, got {level}")
    return sorted(set(levels))


class LinkListConfig(BaseModel):
    """Resolved settings for annotating documents and rendering link lists.

    Field names on the label side describe where the ordered labels live in
    per-document field data: a repeater field holding records, each with a
    plain-text subfield.
    """

    model_config = ConfigDict(extra="forbid")

    repeater_field_name: str = Field(
        default=DEFAULT_REPEATER_FIELD_NAME,
        min_length=1,
        description="Field holding the ordered label records.",
    )
    subfield_name: str = Field(
        default=DEFAULT_SUBFIELD_NAME,
        min_length=1,
        description="Text field read from each label record.",
    )
    list_title: str = Field(
        default=DEFAULT_LIST_TITLE,
        description="Title shown above the link list. Empty disables it.",
    )
    heading_levels: list[int] = Field(
        default_factory=lambda: list(DEFAULT_HEADING_LEVELS),
        description="Heading levels (1-6) that receive anchors.",
    )
    directive_tag: str = Field(
        default=DEFAULT_DIRECTIVE_TAG,
        pattern=r"^[A-Za-z0-9_-]+$",
        description="Name of the [directive] replaced by the link list.",
    )
    container_class: str = DEFAULT_CONTAINER_CLASS
    title_class: str = DEFAULT_TITLE_CLASS
    unresolved_class: str = DEFAULT_UNRESOLVED_CLASS
    unresolved_suffix: str = DEFAULT_UNRESOLVED_SUFFIX

    @field_validator("heading_levels", mode="before")
    @classmethod
    def validate_heading_levels(cls, value: Any) -> list[int]:
        """Normalize heading levels and reject empty or out-of-range sets."""
        levels = parse_heading_levels(value)
        if not levels:
            raise ValueError("At least one heading level is required")
        return levels

    @field_validator("list_title")
    @classmethod
    def strip_list_title(cls, value: str) -> str:
        """Trim surrounding whitespace so blank titles disable the title."""
        return value.strip()
