"""Result envelope returned by every terminal call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from publishing_store.errors import StoreError


@dataclass
class Result:
    """Outcome of a query or mutation chain.

    ``data`` and ``error`` are mutually exclusive: a failed call has
    ``data=None``. ``count`` is set by deletes.
    """

    data: Any = None
    error: StoreError | None = None
    count: int | None = None

    @classmethod
    def failure(cls, error: StoreError) -> Result:
        return cls(data=None, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> Result:
        """Raise the carried error, if any; otherwise return self."""
        if self.error is not None:
            raise self.error
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": self.data,
            "error": self.error.to_dict() if self.error is not None else None,
            "count": self.count,
        }
