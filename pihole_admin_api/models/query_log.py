"""
Models for the Pi-hole query log (``getAllQueries``).
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..exceptions import PiholeDataError
from ..utils import freeze_rows, require_object, require_rows


class AnswerType(IntEnum):
    """How a logged query was resolved."""
    GRAVITY_BLOCKED = 1
    FORWARDED = 2
    CACHED = 3
    WILDCARD_BLOCKED = 4


@dataclass(frozen=True)
class QueryLogEntry:
    """A single query log row. All values are text, as sent by the API."""
    timestamp: str
    query_type: str
    domain: str
    client: str
    answer_type: str

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "QueryLogEntry":
        """
        Build an entry from the first five columns of a query log row.

        Newer FTL versions append more columns; those are ignored.

        Raises:
            PiholeDataError: If the row has fewer than five columns.
        """
        if len(row) < 5:
            raise PiholeDataError(
                f"Query log row has {len(row)} columns, expected at least 5: {row!r}")
        return cls(*row[:5])

    @property
    def answer(self) -> Optional[AnswerType]:
        """The answer type code as an ``AnswerType``, or None if unrecognised."""
        try:
            return AnswerType(int(self.answer_type))
        except ValueError:
            return None

    @property
    def is_blocked(self) -> bool:
        return self.answer in (AnswerType.GRAVITY_BLOCKED, AnswerType.WILDCARD_BLOCKED)


@dataclass(frozen=True)
class PiholeQueryLog:
    """
    Raw query records in the order the API returned them.

    Each row is ``(timestamp, query_type, domain, client, answer_type, ...)``.
    Rows are stored as tuples, so the log cannot be changed after decoding.
    """
    data: Tuple[Tuple[str, ...], ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "data", freeze_rows(self.data))

    @classmethod
    def from_api(cls, data: Any) -> "PiholeQueryLog":
        data = require_object(data, "getAllQueries")
        return cls(data=require_rows(data.get("data"), "data"))

    @property
    def entries(self) -> List[QueryLogEntry]:
        """Rows decoded into ``QueryLogEntry`` objects."""
        return [QueryLogEntry.from_row(row) for row in self.data]

    def __len__(self) -> int:
        return len(self.data)

    def to_dict(self) -> Dict[str, Any]:
        return {"data": [list(row) for row in self.data]}
