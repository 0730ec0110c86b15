"""Chapter and beat data models."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional

from models.record import Record


@dataclass
class Chapter(Record):
    """Represents a single chapter, optionally filed under a part."""
    __table__: ClassVar[str] = "novel_chapters"

    id: str
    novel_id: str
    part_id: Optional[str] = None  # may dangle after its part is deleted
    order_index: int = 1
    title: Optional[str] = None
    pov_character: Optional[str] = None
    summary: Optional[str] = None
    word_count_goal: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class Beat(Record):
    """A single story event, the smallest outline unit."""
    __table__: ClassVar[str] = "novel_beats"

    id: str
    novel_id: str
    description: str
    chapter_id: Optional[str] = None
    order_index: int = 1
    beat_type: Optional[str] = None  # "inciting-incident", "climax", "reveal", ...
    viewpoint: Optional[str] = None  # internal notes for POV/emotion
    created_at: Optional[datetime] = None
