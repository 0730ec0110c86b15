"""Models package — database, row dataclasses, and input schemas."""

from models.database import Database
from models.novel import Novel, Part
from models.chapter import Chapter, Beat
from models.inputs import (
    CreateNovelInput,
    UpdateNovelInput,
    ListNovelsInput,
    CreatePartInput,
    UpdatePartInput,
    ListPartsInput,
    CreateChapterInput,
    UpdateChapterInput,
    ListChaptersInput,
    CreateBeatInput,
    UpdateBeatInput,
    ListBeatsInput,
    DeleteInput,
)

__all__ = [
    "Database",
    "Novel",
    "Part",
    "Chapter",
    "Beat",
    "CreateNovelInput",
    "UpdateNovelInput",
    "ListNovelsInput",
    "CreatePartInput",
    "UpdatePartInput",
    "ListPartsInput",
    "CreateChapterInput",
    "UpdateChapterInput",
    "ListChaptersInput",
    "CreateBeatInput",
    "UpdateBeatInput",
    "ListBeatsInput",
    "DeleteInput",
]
