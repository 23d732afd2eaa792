# nunit_report/status.py
"""Result-token parsing and the fixture status rollup."""

from __future__ import annotations

from typing import Dict, Iterable

from .errors import UnknownStatusError
from .models import Status

# NUnit 2 writes Success/Failure/Error/NotRunnable/Ignored/Cancelled/...,
# NUnit 3 writes Passed/Failed/Skipped/Inconclusive/Warning.
_TOKENS: Dict[str, Status] = {
    "success": Status.PASSED,
    "passed": Status.PASSED,
    "failed": Status.FAILED,
    "failure": Status.FAILED,
    "error": Status.ERROR,
    "notrunnable": Status.ERROR,
    "invalid": Status.ERROR,
    "cancelled": Status.ERROR,
    "inconclusive": Status.INCONCLUSIVE,
    "warning": Status.INCONCLUSIVE,
    "skipped": Status.SKIPPED,
    "ignored": Status.IGNORED,
}


def to_status(token: str) -> Status:
    try:
        return _TOKENS[token.strip().casefold()]
    except KeyError:
        raise UnknownStatusError(token) from None


def fixture_status(statuses: Iterable[Status]) -> Status:
    """
    Collapse a fixture's test statuses into one:
    Error > Failed > Inconclusive > all Skipped/Ignored > Passed.
    An empty fixture counts as Passed.
    """
    seen = set(statuses)
    if Status.ERROR in seen:
        return Status.ERROR
    if Status.FAILED in seen:
        return Status.FAILED
    if Status.INCONCLUSIVE in seen:
        return Status.INCONCLUSIVE
    if seen and seen <= {Status.SKIPPED, Status.IGNORED}:
        return Status.SKIPPED
    return Status.PASSED
