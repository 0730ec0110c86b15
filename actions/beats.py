"""Beat operations."""

import logging

from actions import cascade
from actions.base import define_action, first, new_id, ok
from actions.ownership import resolve_beat, resolve_chapter, resolve_novel
from models.chapter import Beat
from models.inputs import CreateBeatInput, DeleteInput, ListBeatsInput, UpdateBeatInput

logger = logging.getLogger(__name__)


@define_action("createNovelBeat", CreateBeatInput)
async def create_novel_beat(ctx, user, data: CreateBeatInput) -> dict:
    await resolve_novel(ctx, data.novel_id, user.id)
    if data.chapter_id is not None:
        await resolve_chapter(ctx, data.chapter_id, data.novel_id, user.id)

    beat = await ctx.insert(Beat(
        id=new_id(),
        **data.model_dump(),
        created_at=ctx.now(),
    ))
    logger.info("Beat %s created in novel %s (chapter=%s)", beat.id, beat.novel_id, beat.chapter_id)
    return ok(beat=beat)


@define_action("updateNovelBeat", UpdateBeatInput)
async def update_novel_beat(ctx, user, data: UpdateBeatInput) -> dict:
    await resolve_beat(ctx, data.id, data.novel_id, user.id)

    changes = data.changes()
    if changes.get("chapter_id") is not None:
        await resolve_chapter(ctx, changes["chapter_id"], data.novel_id, user.id)

    # beats carry no updated_at column
    beat = first(await ctx.update(Beat, changes, id=data.id), "Beat not found.")
    logger.info("Beat %s updated: %s", beat.id, ", ".join(sorted(changes)))
    return ok(beat=beat)


@define_action("deleteNovelBeat", DeleteInput)
async def delete_novel_beat(ctx, user, data: DeleteInput) -> dict:
    await resolve_beat(ctx, data.id, data.novel_id, user.id)
    await ctx.run(cascade.delete_beat, ctx.db, data.id)
    return ok()


@define_action("listNovelBeats", ListBeatsInput)
async def list_novel_beats(ctx, user, data: ListBeatsInput) -> dict:
    await resolve_novel(ctx, data.novel_id, user.id)

    where = {"novel_id": data.novel_id}
    if data.chapter_id is not None:
        await resolve_chapter(ctx, data.chapter_id, data.novel_id, user.id)
        where["chapter_id"] = data.chapter_id

    beats = await ctx.select(Beat, **where)
    return ok(items=beats, total=len(beats))
