"""Ownership resolution along the Novel -> [Part] -> [Chapter] -> Beat chain.

Only novels carry an owner; everything below is owned through its novel_id.
A resolver never distinguishes "missing" from "someone else's": both raise
NotFoundError. Nothing is cached, each call re-reads the store.
"""

import logging
from typing import TypeVar

from config.exceptions import NotFoundError
from actions.context import ActionContext
from models.chapter import Beat, Chapter
from models.novel import Novel, Part
from models.record import Record

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


async def resolve_novel(ctx: ActionContext, novel_id: str, user_id: str) -> Novel:
    novels = await ctx.select(Novel, id=novel_id, user_id=user_id)
    if not novels:
        logger.debug("Novel %s not resolvable for user %s", novel_id, user_id)
        raise NotFoundError("Novel not found.")
    return novels[0]


async def _resolve_child(
    ctx: ActionContext,
    model: type[RecordT],
    entity_id: str,
    novel_id: str,
    user_id: str,
    message: str,
) -> RecordT:
    await resolve_novel(ctx, novel_id, user_id)
    rows = await ctx.select(model, id=entity_id, novel_id=novel_id)
    if not rows:
        logger.debug("%s %s not found under novel %s", model.__name__, entity_id, novel_id)
        raise NotFoundError(message)
    return rows[0]


async def resolve_part(ctx: ActionContext, part_id: str, novel_id: str, user_id: str) -> Part:
    return await _resolve_child(ctx, Part, part_id, novel_id, user_id, "Novel part not found.")


async def resolve_chapter(ctx: ActionContext, chapter_id: str, novel_id: str, user_id: str) -> Chapter:
    return await _resolve_child(ctx, Chapter, chapter_id, novel_id, user_id, "Chapter not found.")


async def resolve_beat(ctx: ActionContext, beat_id: str, novel_id: str, user_id: str) -> Beat:
    return await _resolve_child(ctx, Beat, beat_id, novel_id, user_id, "Beat not found.")
