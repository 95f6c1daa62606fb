"""Tests for conversion records (core/models.py).

Records are frozen dataclasses — these tests verify immutability,
equality, and the serialised field names and order.
"""

from __future__ import annotations

import pytest

from immutable_id.core.models import GuidRecord, ImmutableIdRecord


class TestImmutableIdRecord:
    def test_as_dict_field_order(self) -> None:
        record = ImmutableIdRecord(guid="g", immutable_id="m")
        assert list(record.as_dict().items()) == [("GUID", "g"), ("ImmutableID", "m")]

    def test_source_and_result(self) -> None:
        record = ImmutableIdRecord(guid="g", immutable_id="m")
        assert record.source == "g"
        assert record.result == "m"

    def test_frozen(self) -> None:
        record = ImmutableIdRecord(guid="g", immutable_id="m")
        with pytest.raises(AttributeError):
            record.guid = "x"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert ImmutableIdRecord("g", "m") == ImmutableIdRecord("g", "m")
        assert ImmutableIdRecord("g", "m") != ImmutableIdRecord("g", "n")


class TestGuidRecord:
    def test_as_dict_field_order(self) -> None:
        record = GuidRecord(immutable_id="m", guid="g")
        assert list(record.as_dict().items()) == [("ImmutableID", "m"), ("GUID", "g")]

    def test_source_and_result(self) -> None:
        record = GuidRecord(immutable_id="m", guid="g")
        assert record.source == "m"
        assert record.result == "g"

    def test_frozen(self) -> None:
        record = GuidRecord(immutable_id="m", guid="g")
        with pytest.raises(AttributeError):
            record.guid = "x"  # type: ignore[misc]
