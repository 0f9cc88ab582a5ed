"""Per-item outcomes for best-effort bulk operations.

Bulk writes are a sequence of independent per-item writes. A failing item
does not stop the rest of the batch; the caller gets one result per item.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, TypeVar

from ..core.enums import BulkStatus
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class BulkItemResult:
    index: int
    key: str
    ok: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class BulkResult:
    items: tuple[BulkItemResult, ...] = ()

    @property
    def succeeded(self) -> int:
        return sum(1 for item in self.items if item.ok)

    @property
    def failed(self) -> int:
        return len(self.items) - self.succeeded

    @property
    def status(self) -> BulkStatus:
        if self.failed == 0:
            return BulkStatus.COMPLETED
        if self.succeeded == 0:
            return BulkStatus.FAILED
        return BulkStatus.PARTIALLY_COMPLETED

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "items": [
                {"index": item.index, "key": item.key, "ok": item.ok, "error": item.error}
                for item in self.items
            ],
        }


def run_bulk(
    items: Iterable[Any],
    *,
    key: Callable[[T], str],
    apply: Callable[[T], object],
    operation: str,
    parse: Optional[Callable[[Any], T]] = None,
) -> BulkResult:
    """Apply ``apply`` to each item, collecting domain failures per item.

    ``parse`` turns a raw item (e.g. one JSON entry) into the typed value; a
    malformed entry fails at its own index instead of rejecting the batch.
    Only ``DomainError`` is captured; store failures propagate to the caller.
    """

    results: list[BulkItemResult] = []
    for index, raw in enumerate(items):
        item_key = f"#{index}"
        try:
            item = raw if parse is None else parse(raw)
            item_key = key(item)
            apply(item)
        except DomainError as e:
            logger.warning("%s: item %s (%s) failed: %s", operation, index, item_key, e)
            results.append(BulkItemResult(index=index, key=item_key, ok=False, error=str(e)))
        else:
            results.append(BulkItemResult(index=index, key=item_key, ok=True))
    return BulkResult(items=tuple(results))
