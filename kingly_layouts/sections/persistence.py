"""JSON file storage for section configurations."""

import contextlib
import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .exceptions import SectionNotFoundError, SectionPersistenceError
from .models import SectionRecord, SectionStore

logger = logging.getLogger(__name__)


class SectionPersistence:
    """Stores section records in a single JSON file with atomic writes.

    Example:
        >>> persistence = SectionPersistence(Path("/tmp/kingly"))
        >>> persistence.save_section(SectionRecord(section_id="hero", layout_id="kl_one_column"))
        True
        >>> persistence.load_section("hero").layout_id
        'kl_one_column'
    """

    def __init__(self, data_dir: Path, filename: str = "sections.json") -> None:
        """Initialize storage under ``data_dir``.

        Raises:
            SectionPersistenceError: If the data directory cannot be created
        """
        self.data_dir = Path(data_dir)
        self.store_file = self.data_dir / filename

        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SectionPersistenceError(
                f"Failed to create data directory: {data_dir}",
                operation="initialize",
                file_path=str(data_dir),
                original_error=e,
            ) from e
        logger.debug(f"Section store: {self.store_file}")

    def load_store(self) -> SectionStore:
        """Load every stored section.

        Returns:
            The store contents; empty when no file exists yet

        Raises:
            SectionPersistenceError: If the file exists but cannot be read or parsed
        """
        if not self.store_file.exists():
            return SectionStore()
        try:
            with self.store_file.open(encoding="utf-8") as f:
                data = json.load(f)
            return SectionStore(**data)
        except (OSError, json.JSONDecodeError, ValidationError, TypeError) as e:
            raise SectionPersistenceError(
                "Failed to load section store",
                operation="load",
                file_path=str(self.store_file),
                original_error=e,
            ) from e

    def list_sections(self) -> list[str]:
        return sorted(self.load_store().sections)

    def load_section(self, section_id: str) -> SectionRecord:
        """Load one section.

        Raises:
            SectionNotFoundError: If the section is not stored
            SectionPersistenceError: If the store cannot be read
        """
        record = self.load_store().sections.get(section_id)
        if record is None:
            raise SectionNotFoundError(section_id)
        return record

    def save_section(self, record: SectionRecord) -> bool:
        """Insert or replace a section record.

        Raises:
            SectionPersistenceError: If the store cannot be written
        """
        store = self.load_store()
        store.sections[record.section_id] = record
        self._write(store, operation="save")
        logger.info(f"Saved section '{record.section_id}' ({record.layout_id})")
        return True

    def delete_section(self, section_id: str) -> bool:
        """Remove a section record.

        Returns:
            True if a record was removed, False if none was stored
        """
        store = self.load_store()
        if store.sections.pop(section_id, None) is None:
            return False
        self._write(store, operation="delete")
        logger.info(f"Deleted section '{section_id}'")
        return True

    def _write(self, store: SectionStore, operation: str) -> None:
        temp_file = self.store_file.with_suffix(".tmp")
        try:
            with temp_file.open("w", encoding="utf-8") as f:
                f.write(store.model_dump_json(indent=2))
                f.flush()
            temp_file.replace(self.store_file)
        except OSError as e:
            if temp_file.exists():
                with contextlib.suppress(OSError):
                    temp_file.unlink()
            raise SectionPersistenceError(
                "Failed to write section store",
                operation=operation,
                file_path=str(self.store_file),
                original_error=e,
            ) from e
