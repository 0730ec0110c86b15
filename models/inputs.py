"""Typed input schemas for the outline operations.

Each operation accepts one of these models. Payloads may use either the
snake_case field names or their camelCase aliases (``novelId``,
``orderIndex``...). Update models track which fields the caller actually
supplied through pydantic's ``model_fields_set``, so an omitted field and a
field explicitly set to ``None`` or ``""`` stay distinguishable.

Fields typed ``str``/``int`` but defaulting to ``None`` on update models are
"may be omitted, may not be nulled": the default is never validated, while an
explicit ``None`` fails type validation.
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ActionInput(BaseModel):
    """Base for every operation input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class PatchInput(ActionInput):
    """Base for partial updates.

    ``_key_fields`` locate the entity; every other supplied field is a change.
    """

    _key_fields: ClassVar[frozenset[str]] = frozenset({"id", "novel_id"})

    def changes(self) -> dict:
        """Return only the fields the caller supplied, excluding key fields."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name not in self._key_fields
        }


# ---- Novel ----

class CreateNovelInput(ActionInput):
    title: str = Field(min_length=1)
    subtitle: Optional[str] = None
    genre: Optional[str] = None
    target_audience: Optional[str] = None
    status: Optional[str] = None
    logline: Optional[str] = None
    notes: Optional[str] = None


class UpdateNovelInput(PatchInput):
    _key_fields: ClassVar[frozenset[str]] = frozenset({"id"})

    id: str = Field(min_length=1)
    title: str = Field(default=None, min_length=1)
    subtitle: Optional[str] = None
    genre: Optional[str] = None
    target_audience: Optional[str] = None
    status: Optional[str] = None
    logline: Optional[str] = None
    notes: Optional[str] = None


class ListNovelsInput(ActionInput):
    pass


# ---- Part ----

class CreatePartInput(ActionInput):
    novel_id: str = Field(min_length=1)
    order_index: int = 1
    title: Optional[str] = None
    summary: Optional[str] = None


class UpdatePartInput(PatchInput):
    id: str = Field(min_length=1)
    novel_id: str = Field(min_length=1)
    order_index: int = None
    title: Optional[str] = None
    summary: Optional[str] = None


class ListPartsInput(ActionInput):
    novel_id: str = Field(min_length=1)


# ---- Chapter ----

class CreateChapterInput(ActionInput):
    novel_id: str = Field(min_length=1)
    part_id: Optional[str] = Field(default=None, min_length=1)
    order_index: int = 1
    title: Optional[str] = None
    pov_character: Optional[str] = None
    summary: Optional[str] = None
    word_count_goal: Optional[float] = None


class UpdateChapterInput(PatchInput):
    id: str = Field(min_length=1)
    novel_id: str = Field(min_length=1)
    part_id: Optional[str] = Field(default=None, min_length=1)  # explicit None detaches
    order_index: int = None
    title: Optional[str] = None
    pov_character: Optional[str] = None
    summary: Optional[str] = None
    word_count_goal: Optional[float] = None


class ListChaptersInput(ActionInput):
    novel_id: str = Field(min_length=1)
    part_id: Optional[str] = Field(default=None, min_length=1)


# ---- Beat ----

class CreateBeatInput(ActionInput):
    novel_id: str = Field(min_length=1)
    description: str = Field(min_length=1)
    chapter_id: Optional[str] = Field(default=None, min_length=1)
    order_index: int = 1
    beat_type: Optional[str] = None
    viewpoint: Optional[str] = None


class UpdateBeatInput(PatchInput):
    id: str = Field(min_length=1)
    novel_id: str = Field(min_length=1)
    chapter_id: Optional[str] = Field(default=None, min_length=1)  # explicit None detaches
    order_index: int = None
    beat_type: Optional[str] = None
    description: str = Field(default=None, min_length=1)
    viewpoint: Optional[str] = None


class ListBeatsInput(ActionInput):
    novel_id: str = Field(min_length=1)
    chapter_id: Optional[str] = Field(default=None, min_length=1)


# ---- Shared ----

class DeleteInput(ActionInput):
    id: str = Field(min_length=1)
    novel_id: str = Field(min_length=1)
