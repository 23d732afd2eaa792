# nunit_report/runinfo.py
from __future__ import annotations

import html
import logging
from typing import Callable, Dict, List, Optional, Tuple

from .document import NUnitDocument
from .formatting import format_run_duration
from .models import RunInfo, TestRunner

logger = logging.getLogger(__name__)


def _anchor(text: str) -> Callable[[str], str]:
    return lambda href: f"<a href='{html.escape(href, quote=True)}'>{text}</a>"


# <environment> attribute -> (label, value formatter); order is display order
ENVIRONMENT_FIELDS: List[Tuple[str, str, Optional[Callable[[str], str]]]] = [
    ("app-under-test", "App under test", None),
    ("app-version", "App version", None),
    ("app-branch", "App branch", None),
    ("syncplicity-full-log", "App full log", _anchor("syncplicity.log")),
    ("syncplicity-logs-archive", "App logs archive", _anchor("syncplicity_logs.zip")),
    ("tests-branch", "Tests branch", None),
    ("environment", "Environment", None),
    ("os-version", "OS Version", None),
    ("os-architecture", "OS Architecture", None),
    ("machine-name", "Machine Name", None),
]


def create_run_info(doc: NUnitDocument, test_runner: TestRunner) -> Optional[RunInfo]:
    """
    Collect run timing (NUnit 3 <test-run>) and <environment> attributes.
    Returns None when the document has no <environment> node at all.
    """
    info: Dict[str, str] = {}

    test_run = doc.first("test-run")
    if test_run is not None:
        start = doc.attribute(test_run, "start-time")
        if start is not None:
            info["Start time"] = start
        end = doc.attribute(test_run, "end-time")
        if end is not None:
            info["End time"] = end
        duration = doc.attribute(test_run, "duration")
        if duration is not None:
            info["Duration"] = format_run_duration(duration)

    env = doc.first("environment")
    if env is None:
        logger.debug("no <environment> node, report carries no run-info")
        return None

    for attr, label, fmt in ENVIRONMENT_FIELDS:
        value = doc.attribute(env, attr)
        if value is None:
            continue
        info[label] = fmt(value) if fmt else value

    return RunInfo(test_runner=test_runner, info=info)
