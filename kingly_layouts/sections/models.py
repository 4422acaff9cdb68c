"""Pydantic models for stored section configurations."""

import re
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

SECTION_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")
STORE_VERSION = "1.0"


class SectionRecord(BaseModel):
    """Configuration of one page section and the layout it uses."""

    section_id: str = Field(..., description="Stable identifier of the page section")
    layout_id: str = Field(..., min_length=1, description="Registered layout id")
    configuration: dict[str, Any] = Field(
        default_factory=dict, description="Flat layout configuration mapping"
    )
    updated_at: datetime = Field(default_factory=datetime.now, description="Last save time")

    @field_validator("section_id")
    @classmethod
    def validate_section_id(cls, v: str) -> str:
        """Section ids are used as JSON keys and CLI arguments; keep them simple."""
        if not SECTION_ID_PATTERN.match(v):
            raise ValueError(
                "Section id may only contain letters, numbers, dots, hyphens and underscores"
            )
        return v


class SectionStore(BaseModel):
    """Everything held in the section store file."""

    version: str = Field(default=STORE_VERSION, description="Store file format version")
    sections: dict[str, SectionRecord] = Field(default_factory=dict)
