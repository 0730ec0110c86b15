"""Novel and part data models."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional

from models.record import Record


@dataclass
class Novel(Record):
    """Root of the outline hierarchy; the only entity that carries an owner."""
    __table__: ClassVar[str] = "novels"

    id: str
    user_id: str
    title: str
    subtitle: Optional[str] = None
    genre: Optional[str] = None
    target_audience: Optional[str] = None  # "YA", "Adult", ...
    status: Optional[str] = None  # free-form: idea, outlining, drafting, revising
    logline: Optional[str] = None  # one-sentence pitch
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class Part(Record):
    """Optional grouping layer between a novel and its chapters."""
    __table__: ClassVar[str] = "novel_parts"

    id: str
    novel_id: str
    order_index: int = 1
    title: Optional[str] = None  # "Part I - Beginnings"
    summary: Optional[str] = None
    created_at: Optional[datetime] = None
