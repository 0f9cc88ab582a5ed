import pytest

from payroll_ledger.common.bulk import run_bulk
from payroll_ledger.core.enums import BulkStatus
from payroll_ledger.core.exceptions import ValidationError


def _apply(item):
    if item < 0:
        raise ValidationError("negative")
    if item == 0:
        raise RuntimeError("store down")


def test_domain_failures_are_collected_per_item():
    result = run_bulk([1, -1, 2], key=str, apply=_apply, operation="t")
    assert result.status == BulkStatus.PARTIALLY_COMPLETED
    assert result.items[1].error == "negative"


def test_empty_batch_is_completed():
    assert run_bulk([], key=str, apply=_apply, operation="t").status == BulkStatus.COMPLETED


def test_other_errors_propagate():
    with pytest.raises(RuntimeError):
        run_bulk([1, 0, 2], key=str, apply=_apply, operation="t")


def _parse(raw):
    if not isinstance(raw, int):
        raise ValidationError("not a number")
    return raw


def test_parse_failures_are_reported_at_their_own_index():
    result = run_bulk([1, "x", 2], key=str, apply=_apply, operation="t", parse=_parse)

    assert [(i.index, i.key, i.ok) for i in result.items] == [(0, "1", True), (1, "#1", False), (2, "2", True)]
    assert result.items[1].error == "not a number"
