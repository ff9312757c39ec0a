"""Ordered label extraction from per-document field data.

Field data is a mapping of field names to values. The labels live in a
repeater field: an ordered list of records, each holding the label text in a
named subfield::

    link_to_headings:
      - blog_page_headings: Getting Started
      - blog_page_headings: Configuration
"""

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from headinglinks.lib.errors import FileNotFoundError, ValidationError
from headinglinks.lib.logging_config import get_logger

logger = get_logger(__name__)


def extract_labels(records: Any, subfield_name: str) -> list[str]:
    """Pull the label text out of each record, keeping record order.

    Records that are not mappings, or whose subfield is missing or not a
    string, contribute an empty label. Anything other than a list of records
    yields no labels.

    Args:
        records: Repeater field value
        subfield_name: Name of the text subfield

    Returns:
        Ordered labels, possibly empty strings
    """
    if records is None:
        return []
    if isinstance(records, str | bytes) or not isinstance(records, Sequence):
        logger.debug(
            f"Label source is {type(records).__name__}, not a list of records"
        )
        return []

    labels: list[str] = []
    for record in records:
        value = record.get(subfield_name) if isinstance(record, Mapping) else None
        labels.append(value if isinstance(value, str) else "")
    return labels


def labels_from_fields(
    fields: Mapping[str, Any] | None,
    repeater_field_name: str,
    subfield_name: str,
) -> list[str]:
    """Return the ordered labels configured for one document.

    ``fields`` is None when no field-data provider is available; that is
    reported once as a warning and rendered as an empty link list.

    Args:
        fields: Per-document field data
        repeater_field_name: Field holding the label records
        subfield_name: Text field inside each record

    Returns:
        Ordered labels
    """
    if fields is None:
        logger.warning(
            "No field data available for this document; "
            "the heading link list will be empty"
        )
        return []
    return extract_labels(fields.get(repeater_field_name), subfield_name)


def load_fields_file(file_path: str) -> dict[str, Any]:
    """Load per-document field data from a YAML or JSON file.

    Args:
        file_path: Path to a ``.yaml``, ``.yml`` or ``.json`` file

    Returns:
        Field mapping; empty if the file is empty

    Raises:
        FileNotFoundError: If the file cannot be read
        ValidationError: If the file does not parse to a mapping
    """
    path = Path(file_path)
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileNotFoundError(
            file_path, "Field data file could not be read."
        ) from e

    try:
        if path.suffix.lower() == ".json":
            content = json.loads(raw_text) if raw_text.strip() else None
        else:
            content = yaml.safe_load(raw_text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValidationError(
            source=file_path,
            message=f"Field data could not be parsed: {e}",
            expected="YAML or JSON mapping",
            actual="unparseable text",
        ) from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValidationError(
            source=file_path,
            message="Field data must be a mapping of field names to values",
            expected="mapping",
            actual=type(content).__name__,
        )
    return content
