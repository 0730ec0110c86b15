"""Chapter operations.

A chapter may sit under a part of the same novel or directly under the
novel. The part reference is checked whenever it is written, never when read.
"""

import logging

from actions import cascade
from actions.base import define_action, first, new_id, ok
from actions.ownership import resolve_chapter, resolve_novel, resolve_part
from models.chapter import Chapter
from models.inputs import CreateChapterInput, DeleteInput, ListChaptersInput, UpdateChapterInput

logger = logging.getLogger(__name__)


@define_action("createNovelChapter", CreateChapterInput)
async def create_novel_chapter(ctx, user, data: CreateChapterInput) -> dict:
    await resolve_novel(ctx, data.novel_id, user.id)
    if data.part_id is not None:
        await resolve_part(ctx, data.part_id, data.novel_id, user.id)

    now = ctx.now()
    chapter = await ctx.insert(Chapter(
        id=new_id(),
        **data.model_dump(),
        created_at=now,
        updated_at=now,
    ))
    logger.info("Chapter %s created in novel %s (part=%s)", chapter.id, chapter.novel_id, chapter.part_id)
    return ok(chapter=chapter)


@define_action("updateNovelChapter", UpdateChapterInput)
async def update_novel_chapter(ctx, user, data: UpdateChapterInput) -> dict:
    await resolve_chapter(ctx, data.id, data.novel_id, user.id)

    changes = data.changes()
    # An explicit None detaches the chapter from its part
    if changes.get("part_id") is not None:
        await resolve_part(ctx, changes["part_id"], data.novel_id, user.id)

    changes["updated_at"] = ctx.now()
    chapter = first(await ctx.update(Chapter, changes, id=data.id), "Chapter not found.")
    logger.info("Chapter %s updated: %s", chapter.id, ", ".join(sorted(changes)))
    return ok(chapter=chapter)


@define_action("deleteNovelChapter", DeleteInput)
async def delete_novel_chapter(ctx, user, data: DeleteInput) -> dict:
    await resolve_chapter(ctx, data.id, data.novel_id, user.id)
    await ctx.run(cascade.delete_chapter, ctx.db, data.id)
    return ok()


@define_action("listNovelChapters", ListChaptersInput)
async def list_novel_chapters(ctx, user, data: ListChaptersInput) -> dict:
    await resolve_novel(ctx, data.novel_id, user.id)

    where = {"novel_id": data.novel_id}
    if data.part_id is not None:
        await resolve_part(ctx, data.part_id, data.novel_id, user.id)
        where["part_id"] = data.part_id

    chapters = await ctx.select(Chapter, **where)
    return ok(items=chapters, total=len(chapters))
