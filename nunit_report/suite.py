# nunit_report/suite.py
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import List, Set

from .categories import get_categories
from .document import NUnitDocument, attr_equals
from .models import Status, TestSuite
from .status import fixture_status
from .testcase import build_test, end_time, required, start_time

logger = logging.getLogger(__name__)


@dataclass
class SuiteResult:
    """One fixture's output, merged into the Report by the aggregator."""

    suite: TestSuite
    categories: Set[str] = field(default_factory=set)
    statuses: List[Status] = field(default_factory=list)


def is_fixture(node: ET.Element) -> bool:
    return attr_equals(node, "type", "TestFixture")


def suite_status_message(doc: NUnitDocument, suite: ET.Element) -> str:
    failure = doc.element(suite, "failure")
    if failure is None:
        return ""
    message = doc.element(failure, "message")
    text = doc.text(message) if message is not None else ""
    trace = doc.text(doc.element(failure, "stack-trace"))
    if trace.strip():
        text = f"{text}\n\nStack trace:\n{trace}"
    return text


def build_suite(doc: NUnitDocument, suite: ET.Element) -> SuiteResult:
    name = required(doc, suite, "name")
    suite_categories = get_categories(doc, suite)

    # intermediate ParameterizedTest/GenericFixture wrappers are flattened here
    tests = [
        build_test(doc, tc, suite_categories)
        for tc in doc.descendants(suite, "test-case")
    ]
    statuses = [t.status for t in tests]

    categories: Set[str] = set()
    for t in tests:
        categories.update(t.categories)

    logger.debug("fixture %s: %d test(s)", name, len(tests))
    return SuiteResult(
        suite=TestSuite(
            name=name,
            start_time=start_time(doc, suite),
            end_time=end_time(doc, suite),
            status=fixture_status(statuses),
            status_message=suite_status_message(doc, suite),
            tests=tests,
        ),
        categories=categories,
        statuses=statuses,
    )
