"""Shared row <-> dataclass conversion for persisted entities."""

from dataclasses import asdict, fields
from datetime import datetime
from typing import Any, ClassVar, Mapping


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


class Record:
    """Mixin for dataclasses stored one-per-row in a table.

    Timestamp columns (names ending in ``_at``) are persisted as ISO-8601
    text and parsed back into ``datetime`` on load.
    """

    __table__: ClassVar[str]

    @classmethod
    def columns(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_row(cls, row: Mapping[str, Any]):
        values = {}
        for name in cls.columns():
            value = row[name]
            if name.endswith("_at") and isinstance(value, str):
                value = datetime.fromisoformat(value)
            values[name] = value
        return cls(**values)

    def to_row(self) -> dict[str, Any]:
        return asdict(self)

    def to_dict(self) -> dict[str, Any]:
        """camelCase, JSON-friendly view of the record."""
        out = {}
        for name, value in asdict(self).items():
            if isinstance(value, datetime):
                value = value.isoformat()
            out[_camel(name)] = value
        return out
