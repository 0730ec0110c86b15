"""Tests for novel operations."""

from unittest.mock import MagicMock

import pytest

from actions import create_novel, list_novels, update_novel
from actions.context import ActionContext
from config.exceptions import EmptyUpdateError, NotFoundError, ValidationError
from models.inputs import CreateNovelInput


class TestCreateNovel:
    @pytest.mark.asyncio
    async def test_create_returns_envelope(self, ctx):
        result = await create_novel(ctx, {"title": "Dune Redux", "targetAudience": "Adult"})
        assert result["success"] is True
        novel = result["data"]["novel"]
        assert novel.title == "Dune Redux"
        assert novel.target_audience == "Adult"
        assert novel.user_id == "alice"
        assert novel.subtitle is None

    @pytest.mark.asyncio
    async def test_timestamps_stamped(self, ctx):
        novel = (await create_novel(ctx, title="Stamped"))["data"]["novel"]
        assert novel.created_at is not None
        assert novel.created_at == novel.updated_at

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, ctx):
        a = (await create_novel(ctx, title="A"))["data"]["novel"]
        b = (await create_novel(ctx, title="B"))["data"]["novel"]
        assert a.id != b.id

    @pytest.mark.asyncio
    async def test_accepts_input_model(self, ctx):
        result = await create_novel(ctx, CreateNovelInput(title="Typed", status="idea"))
        assert result["data"]["novel"].status == "idea"

    @pytest.mark.asyncio
    async def test_status_is_free_form(self, ctx):
        novel = (await create_novel(ctx, title="T", status="stuck in act two"))["data"]["novel"]
        assert novel.status == "stuck in act two"

    @pytest.mark.asyncio
    async def test_empty_title_rejected_before_storage(self, db, ctx):
        spy = MagicMock(wraps=db)
        with pytest.raises(ValidationError):
            await create_novel(ActionContext(db=spy, user=ctx.user), title="")
        assert spy.method_calls == []


class TestUpdateNovel:
    @pytest.mark.asyncio
    async def test_partial_update(self, ctx, sample_novel):
        result = await update_novel(ctx, id=sample_novel.id, logline="A desert planet remembers.")
        novel = result["data"]["novel"]
        assert novel.logline == "A desert planet remembers."
        assert novel.title == sample_novel.title
        assert novel.genre == sample_novel.genre
        assert novel.status == sample_novel.status

    @pytest.mark.asyncio
    async def test_refreshes_updated_at_only(self, ctx, sample_novel):
        novel = (await update_novel(ctx, id=sample_novel.id, status="drafting"))["data"]["novel"]
        assert novel.updated_at > sample_novel.updated_at
        assert novel.created_at == sample_novel.created_at

    @pytest.mark.asyncio
    async def test_clear_optional_field_with_empty_string(self, ctx, sample_novel):
        novel = (await update_novel(ctx, id=sample_novel.id, genre=""))["data"]["novel"]
        assert novel.genre == ""

    @pytest.mark.asyncio
    async def test_empty_update_rejected_before_storage(self, db, ctx, sample_novel):
        spy = MagicMock(wraps=db)
        with pytest.raises(EmptyUpdateError):
            await update_novel(ActionContext(db=spy, user=ctx.user), id=sample_novel.id)
        assert spy.method_calls == []

    @pytest.mark.asyncio
    async def test_unknown_novel(self, ctx):
        with pytest.raises(NotFoundError):
            await update_novel(ctx, id="missing", title="Nope")


class TestListNovels:
    @pytest.mark.asyncio
    async def test_lists_only_own_novels(self, ctx, stranger_ctx):
        await create_novel(ctx, title="Mine 1")
        await create_novel(ctx, title="Mine 2")
        await create_novel(stranger_ctx, title="Theirs")

        result = await list_novels(ctx)
        titles = sorted(n.title for n in result["data"]["items"])
        assert titles == ["Mine 1", "Mine 2"]
        assert result["data"]["total"] == 2

    @pytest.mark.asyncio
    async def test_empty(self, ctx):
        result = await list_novels(ctx)
        assert result == {"success": True, "data": {"items": [], "total": 0}}
