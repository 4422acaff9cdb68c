"""Tests for section records and their JSON store."""

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from kingly_layouts.sections import (
    SectionNotFoundError,
    SectionPersistence,
    SectionPersistenceError,
    SectionRecord,
)

logging.getLogger("kingly_layouts").setLevel(logging.CRITICAL)


@pytest.fixture
def persistence(tmp_path: Path) -> SectionPersistence:
    return SectionPersistence(tmp_path / "sections")


def record(section_id: str = "hero", **configuration: object) -> SectionRecord:
    return SectionRecord(section_id=section_id, layout_id="kl_two_column", configuration=configuration)


class TestSectionRecord:
    """Tests for SectionRecord validation."""

    @pytest.mark.parametrize("section_id", ["hero", "page.1", "front_page-top", "2col"])
    def test_valid_ids(self, section_id: str) -> None:
        assert record(section_id).section_id == section_id

    @pytest.mark.parametrize("section_id", ["", "-hero", "with space", "a/b"])
    def test_invalid_ids(self, section_id: str) -> None:
        with pytest.raises(ValidationError):
            record(section_id)


class TestSectionPersistence:
    """Tests for SectionPersistence."""

    def test_empty_store(self, persistence: SectionPersistence) -> None:
        assert persistence.list_sections() == []
        assert not persistence.store_file.exists()

    def test_save_and_load(self, persistence: SectionPersistence) -> None:
        persistence.save_section(record(gap_option={"mobile": "sm"}, border_color="#FF0000"))
        loaded = persistence.load_section("hero")

        assert loaded.layout_id == "kl_two_column"
        assert loaded.configuration == {"gap_option": {"mobile": "sm"}, "border_color": "#FF0000"}

    def test_save_replaces_existing(self, persistence: SectionPersistence) -> None:
        persistence.save_section(record(border_color="#FF0000"))
        persistence.save_section(record(border_color="#00FF00"))

        assert persistence.list_sections() == ["hero"]
        assert persistence.load_section("hero").configuration["border_color"] == "#00FF00"

    def test_store_file_format(self, persistence: SectionPersistence) -> None:
        persistence.save_section(record("b"))
        persistence.save_section(record("a"))
        data = json.loads(persistence.store_file.read_text(encoding="utf-8"))

        assert data["version"] == "1.0"
        assert set(data["sections"]) == {"a", "b"}
        assert persistence.list_sections() == ["a", "b"]
        assert not persistence.store_file.with_suffix(".tmp").exists()

    def test_missing_section(self, persistence: SectionPersistence) -> None:
        with pytest.raises(SectionNotFoundError) as exc_info:
            persistence.load_section("nope")
        assert exc_info.value.section_id == "nope"

    def test_delete(self, persistence: SectionPersistence) -> None:
        persistence.save_section(record())

        assert persistence.delete_section("hero") is True
        assert persistence.delete_section("hero") is False
        assert persistence.list_sections() == []

    def test_corrupt_store(self, persistence: SectionPersistence) -> None:
        persistence.store_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(SectionPersistenceError) as exc_info:
            persistence.load_store()
        assert exc_info.value.operation == "load"

    def test_write_failure_cleans_up(self, persistence: SectionPersistence) -> None:
        with patch.object(Path, "replace", side_effect=OSError("disk full")):
            with pytest.raises(SectionPersistenceError) as exc_info:
                persistence.save_section(record())

        assert exc_info.value.operation == "save"
        assert not persistence.store_file.with_suffix(".tmp").exists()
        assert not persistence.store_file.exists()
