# nunit_report/parser.py
"""
Build a Report from an NUnit 2 (<test-results>) or NUnit 3 (<test-run>)
result document.

The dialect is never detected up front; each field falls back from the
NUnit 3 attribute name to the NUnit 2 one (or a default) on its own.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence, Set

from .config import settings
from .document import NUnitDocument, attr_equals
from .errors import MalformedCountError, MissingFieldError, ReportParseError
from .models import Report, Status, TestRunner, TestSuite
from .runinfo import create_run_info
from .suite import SuiteResult, build_suite, is_fixture

logger = logging.getLogger(__name__)


# ---- root counts ------------------------------------------------------------


def _count(doc: NUnitDocument, root: ET.Element, name: str) -> Optional[int]:
    value = doc.attribute(root, name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise MalformedCountError(name, value) from None


def _required_count(
    doc: NUnitDocument, root: ET.Element, name: str, strict: bool
) -> int:
    value = _count(doc, root, name)
    if value is None:
        if strict:
            raise MissingFieldError(name, root.tag)
        return 0
    return value


def fill_counts(report: Report, doc: NUnitDocument, strict_counts: bool) -> None:
    root = doc.root
    test_cases = doc.descendants(root, "test-case")

    total = _count(doc, root, "total")
    report.total = total if total is not None else len(test_cases)

    passed = _count(doc, root, "passed")
    if passed is None:
        passed = sum(1 for tc in test_cases if attr_equals(tc, "result", "success"))
    report.passed = passed

    failed = _count(doc, root, "failed")
    if failed is None:
        failed = _count(doc, root, "failures")  # NUnit 2
    if failed is None:
        raise MissingFieldError("failed", root.tag)
    report.failed = failed

    report.errors = _count(doc, root, "errors") or 0
    report.inconclusive = _required_count(doc, root, "inconclusive", strict_counts)
    report.skipped = _required_count(doc, root, "skipped", strict_counts)
    report.skipped += _count(doc, root, "ignored") or 0


# ---- root timing & messages -------------------------------------------------


def fill_times(report: Report, doc: NUnitDocument) -> None:
    root = doc.root
    start = doc.attribute(root, "start-time")
    if start is None:
        # NUnit 2 splits the timestamp into date="..." time="..."
        parts = [doc.attribute(root, "date"), doc.attribute(root, "time")]
        start = " ".join(p for p in parts if p)
    report.start_time = start
    report.end_time = doc.attribute(root, "end-time") or ""


def assembly_failure_message(doc: NUnitDocument) -> str:
    for suite in doc.descendants(doc.root, "test-suite"):
        if doc.attribute(suite, "type") == "Assembly" and doc.attribute(suite, "result") == "Failed":
            return doc.text(suite)
    return ""


# ---- suites -----------------------------------------------------------------


def build_suites(
    doc: NUnitDocument, max_workers: Optional[int] = None
) -> List[SuiteResult]:
    """Fixtures are independent; results come back in source order."""
    fixtures = [s for s in doc.descendants(doc.root, "test-suite") if is_fixture(s)]
    if not fixtures:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(lambda s: build_suite(doc, s), fixtures))


def merge_suites(report: Report, results: Sequence[SuiteResult]) -> None:
    suites: List[TestSuite] = []
    categories: Set[str] = set()
    statuses: List[Status] = []
    for result in results:
        suites.append(result.suite)
        categories |= result.categories
        statuses.extend(result.statuses)

    report.suites = sorted(suites, key=lambda s: s.name)
    report.categories = sorted(categories)
    report.statuses = statuses


# ---- entry points -----------------------------------------------------------


def parse_document(
    root: ET.Element,
    file_name: str,
    strict_counts: Optional[bool] = None,
    max_workers: Optional[int] = None,
) -> Report:
    if strict_counts is None:
        strict_counts = settings.STRICT_COUNTS
    if max_workers is None:
        max_workers = settings.MAX_WORKERS

    doc = NUnitDocument(root)
    report = Report(
        file_name=file_name,
        assembly_name=doc.attribute(root, "name"),
        test_runner=TestRunner.NUNIT,
    )
    try:
        report.run_info = create_run_info(doc, report.test_runner)
        fill_counts(report, doc, strict_counts)
        fill_times(report, doc)
        report.status_message = assembly_failure_message(doc)
        merge_suites(report, build_suites(doc, max_workers))
    except ReportParseError as e:
        e.file_name = file_name
        logger.error("Failed to parse NUnit results %s: %s", file_name, e)
        raise

    logger.info(
        "%s: %d total, %d passed, %d failed, %d suite(s)",
        file_name,
        report.total,
        report.passed,
        report.failed,
        len(report.suites),
    )
    return report


def parse_file(path: Path | str, **kwargs) -> Report:
    path = Path(path)
    root = ET.parse(path).getroot()
    return parse_document(root, path.stem, **kwargs)


def setup_logging(level: Optional[str] = None):
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(levelname)s: %(message)s",
    )


def main(argv: Sequence[str]) -> int:
    setup_logging()
    failed = 0
    for arg in argv:
        try:
            report = parse_file(arg)
        except (ReportParseError, ET.ParseError, OSError) as e:
            # one bad file must not stop the rest
            logger.error("Skipping %s: %s", arg, e)
            failed += 1
            continue
        print(report.model_dump_json(indent=2))
    return 1 if failed else 0


if __name__ == "__main__":
    import sys

    sys.exit(main(sys.argv[1:]))
