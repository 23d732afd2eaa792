# nunit_report/formatting.py
from __future__ import annotations

import math
from typing import Tuple

from .errors import MalformedDurationError


def _split_seconds(value: str) -> Tuple[int, int, int, int]:
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise MalformedDurationError(value) from None
    if not math.isfinite(seconds):
        raise MalformedDurationError(value)

    # negative durations are shown by magnitude, without a sign
    total_ms = int(round(abs(seconds) * 1000))
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs, millis = divmod(rest, 1000)
    return hours, minutes, secs, millis


def format_duration(value: str) -> str:
    """
    '1.234' (seconds) -> '00:00:01:234'.

    Hours do not wrap at 24 on purpose: 90000 seconds gives '25:00:00:000'
    rather than dropping the day, so the column can be wider than two digits.
    """
    h, m, s, ms = _split_seconds(value)
    return f"{h:02d}:{m:02d}:{s:02d}:{ms:03d}"


def format_run_duration(value: str) -> str:
    """'65.5' (seconds) -> '00h:01m:05s:500ms', as shown in the run-info block."""
    h, m, s, ms = _split_seconds(value)
    return f"{h:02d}h:{m:02d}m:{s:02d}s:{ms:03d}ms"
