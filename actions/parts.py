"""Part operations."""

import logging

from actions import cascade
from actions.base import define_action, first, new_id, ok
from actions.ownership import resolve_novel, resolve_part
from models.inputs import CreatePartInput, DeleteInput, ListPartsInput, UpdatePartInput
from models.novel import Part

logger = logging.getLogger(__name__)


@define_action("createNovelPart", CreatePartInput)
async def create_novel_part(ctx, user, data: CreatePartInput) -> dict:
    await resolve_novel(ctx, data.novel_id, user.id)

    part = await ctx.insert(Part(
        id=new_id(),
        novel_id=data.novel_id,
        order_index=data.order_index,
        title=data.title,
        summary=data.summary,
        created_at=ctx.now(),
    ))
    logger.info("Part %s created in novel %s", part.id, part.novel_id)
    return ok(part=part)


@define_action("updateNovelPart", UpdatePartInput)
async def update_novel_part(ctx, user, data: UpdatePartInput) -> dict:
    await resolve_part(ctx, data.id, data.novel_id, user.id)

    # parts carry no updated_at column
    changes = data.changes()
    part = first(await ctx.update(Part, changes, id=data.id), "Novel part not found.")
    logger.info("Part %s updated: %s", part.id, ", ".join(sorted(changes)))
    return ok(part=part)


@define_action("deleteNovelPart", DeleteInput)
async def delete_novel_part(ctx, user, data: DeleteInput) -> dict:
    await resolve_part(ctx, data.id, data.novel_id, user.id)
    await ctx.run(cascade.delete_part, ctx.db, data.id)
    return ok()


@define_action("listNovelParts", ListPartsInput)
async def list_novel_parts(ctx, user, data: ListPartsInput) -> dict:
    await resolve_novel(ctx, data.novel_id, user.id)
    parts = await ctx.select(Part, novel_id=data.novel_id)
    return ok(items=parts, total=len(parts))
