"""Novel operations. Novels are the only owned entity and cannot be deleted."""

import logging

from actions.base import define_action, first, new_id, ok
from actions.ownership import resolve_novel
from models.inputs import CreateNovelInput, ListNovelsInput, UpdateNovelInput
from models.novel import Novel

logger = logging.getLogger(__name__)


@define_action("createNovel", CreateNovelInput)
async def create_novel(ctx, user, data: CreateNovelInput) -> dict:
    now = ctx.now()
    novel = await ctx.insert(Novel(
        id=new_id(),
        user_id=user.id,
        **data.model_dump(),
        created_at=now,
        updated_at=now,
    ))
    logger.info("Novel %s created for user %s", novel.id, user.id)
    return ok(novel=novel)


@define_action("updateNovel", UpdateNovelInput)
async def update_novel(ctx, user, data: UpdateNovelInput) -> dict:
    await resolve_novel(ctx, data.id, user.id)

    changes = data.changes()
    changes["updated_at"] = ctx.now()
    novel = first(await ctx.update(Novel, changes, id=data.id), "Novel not found.")
    logger.info("Novel %s updated: %s", novel.id, ", ".join(sorted(changes)))
    return ok(novel=novel)


@define_action("listNovels", ListNovelsInput)
async def list_novels(ctx, user, data: ListNovelsInput) -> dict:
    novels = await ctx.select(Novel, user_id=user.id)
    return ok(items=novels, total=len(novels))
