"""Per-call execution context handed to every operation."""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Optional, TypeVar

from models.database import Database
from models.record import Record

RecordT = TypeVar("RecordT", bound=Record)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class UserIdentity:
    """An already-authenticated caller. The id is opaque to the outliner."""
    id: str


@dataclass
class ActionContext:
    """Carries the caller, the store handle and the clock into an operation.

    Every storage call goes through ``asyncio.to_thread`` so the event loop
    yields at each store access; rows come back as model dataclasses.
    """

    db: Database
    user: Optional[UserIdentity] = None
    clock: Callable[[], datetime] = utcnow

    def now(self) -> datetime:
        return self.clock()

    async def run(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Run a synchronous storage routine off the event loop."""
        return await asyncio.to_thread(fn, *args, **kwargs)

    async def insert(self, record: RecordT) -> RecordT:
        row = await self.run(self.db.insert, record.__table__, record.to_row())
        return type(record).from_row(row)

    async def select(self, model: type[RecordT], **where: Any) -> list[RecordT]:
        rows = await self.run(self.db.select, model.__table__, **where)
        return [model.from_row(row) for row in rows]

    async def update(self, model: type[RecordT], values: dict, **where: Any) -> list[RecordT]:
        rows = await self.run(self.db.update, model.__table__, values, **where)
        return [model.from_row(row) for row in rows]
