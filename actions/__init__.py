"""Actions package — the ownership-scoped operations over the outline hierarchy."""

from actions.base import Action, define_action
from actions.context import ActionContext, UserIdentity
from actions.identity import require_user
from actions.ownership import resolve_novel, resolve_part, resolve_chapter, resolve_beat
from actions.novels import create_novel, update_novel, list_novels
from actions.parts import create_novel_part, update_novel_part, delete_novel_part, list_novel_parts
from actions.chapters import (
    create_novel_chapter,
    update_novel_chapter,
    delete_novel_chapter,
    list_novel_chapters,
)
from actions.beats import create_novel_beat, update_novel_beat, delete_novel_beat, list_novel_beats

# Operation catalog, keyed by the public operation name
server: dict[str, Action] = {
    action.name: action
    for action in (
        create_novel,
        update_novel,
        list_novels,
        create_novel_part,
        update_novel_part,
        delete_novel_part,
        list_novel_parts,
        create_novel_chapter,
        update_novel_chapter,
        delete_novel_chapter,
        list_novel_chapters,
        create_novel_beat,
        update_novel_beat,
        delete_novel_beat,
        list_novel_beats,
    )
}

__all__ = [
    "Action",
    "ActionContext",
    "UserIdentity",
    "define_action",
    "require_user",
    "resolve_novel",
    "resolve_part",
    "resolve_chapter",
    "resolve_beat",
    "server",
    "create_novel",
    "update_novel",
    "list_novels",
    "create_novel_part",
    "update_novel_part",
    "delete_novel_part",
    "list_novel_parts",
    "create_novel_chapter",
    "update_novel_chapter",
    "delete_novel_chapter",
    "list_novel_chapters",
    "create_novel_beat",
    "update_novel_beat",
    "delete_novel_beat",
    "list_novel_beats",
]
