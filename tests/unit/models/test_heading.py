"""Unit tests for headinglinks.models.heading module."""

import pytest
from pydantic import ValidationError

from headinglinks.models.heading import HeadingRecord, HeadingTable, LinkEntry


def _record(text: str, key: str, heading_id: str, level: int = 2) -> HeadingRecord:
    return HeadingRecord(raw_text=text, normalized_key=key, id=heading_id, level=level)


@pytest.mark.unit
class TestHeadingRecord:
    """Tests for HeadingRecord model."""

    def test_defaults(self) -> None:
        """Test that records default to generated ids."""
        record = _record("Setup", "setup", "setup")
        assert record.preexisting is False

    @pytest.mark.parametrize("level", [0, 7])
    def test_level_out_of_range(self, level: int) -> None:
        """Test that heading levels outside 1-6 are rejected."""
        with pytest.raises(ValidationError):
            _record("Setup", "setup", "setup", level=level)

    def test_record_is_frozen(self) -> None:
        """Test that records cannot be modified after creation."""
        record = _record("Setup", "setup", "setup")
        with pytest.raises(ValidationError):
            record.id = "other"  # type: ignore[misc]


@pytest.mark.unit
class TestHeadingTable:
    """Tests for HeadingTable model."""

    def test_record_and_lookup(self) -> None:
        """Test that recorded headings can be looked up by key."""
        table = HeadingTable()
        table.record(_record("Setup", "setup", "setup"))
        assert table.get("setup") == "setup"
        assert "setup" in table
        assert table.get("missing") is None
        assert len(table) == 1

    def test_later_record_overwrites_key(self) -> None:
        """Test last-write-wins for records sharing a key."""
        table = HeadingTable()
        table.record(_record("Setup", "setup", "setup"))
        table.record(_record("SETUP", "setup", "setup-1"))
        assert table.ids == {"setup": "setup-1"}
        assert len(table.headings) == 2
        assert [h.id for h in table.headings] == ["setup", "setup-1"]

    def test_from_mapping_copies(self) -> None:
        """Test that from_mapping does not alias the given dict."""
        ids = {"a": "a"}
        table = HeadingTable.from_mapping(ids)
        ids["b"] = "b"
        assert "b" not in table


@pytest.mark.unit
class TestLinkEntry:
    """Tests for LinkEntry model."""

    def test_resolved_entry(self) -> None:
        """Test href and resolved flag for a matched label."""
        entry = LinkEntry(label="Setup", target_id="setup-1")
        assert entry.resolved is True
        assert entry.href == "#setup-1"

    def test_unresolved_entry(self) -> None:
        """Test that unmatched labels have no href."""
        entry = LinkEntry(label="Missing")
        assert entry.resolved is False
        assert entry.href is None
