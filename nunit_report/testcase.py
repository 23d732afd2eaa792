# nunit_report/testcase.py
"""
Turns one <test-case> element into a Test record.

Works for both dialects:
  * NUnit 2: time="0.012", no start/end, failure/reason children
  * NUnit 3: start-time/end-time/duration, failure/reason/output children
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from typing import List, Set

from .categories import resolve_test_categories
from .document import NUnitDocument, attr_equals
from .errors import MissingFieldError
from .formatting import format_duration
from .models import Test
from .status import to_status

logger = logging.getLogger(__name__)

DELIMITER = "\n" + "=" * 52 + "\n"

SCREENSHOT_RE = re.compile(r"Generated Screenshot:\s(<a\b.*?</a>)")


def required(doc: NUnitDocument, node: ET.Element, name: str) -> str:
    value = doc.attribute(node, name)
    if value is None:
        raise MissingFieldError(name, node.tag)
    return value


def start_time(doc: NUnitDocument, node: ET.Element) -> str:
    # NUnit 3 start-time, else NUnit 2 time
    return doc.attribute(node, "start-time") or doc.attribute(node, "time") or ""


def end_time(doc: NUnitDocument, node: ET.Element) -> str:
    return doc.attribute(node, "end-time") or ""


def get_description(doc: NUnitDocument, test_case: ET.Element) -> str:
    for prop in doc.descendants(test_case, "property"):
        if attr_equals(prop, "name", "Description"):
            return doc.attribute(prop, "value") or ""
    return ""


def build_status_message(doc: NUnitDocument, test_case: ET.Element) -> str:
    sections: List[str] = []

    failure = doc.element(test_case, "failure")
    if failure is not None:
        message = doc.element(failure, "message")
        if message is not None:
            sections.append(
                DELIMITER + "EXCEPTION MESSAGE: \n" + doc.text(message).strip()
            )
        else:
            logger.warning(
                "test-case %s has a <failure> without <message>",
                doc.attribute(test_case, "name"),
            )
        trace = doc.text(doc.element(failure, "stack-trace")).strip()
        if trace:
            sections.append(DELIMITER + "EXCEPTION STACKTRACE:\n" + trace)

    reason = doc.element(test_case, "reason")
    if reason is not None:
        reason_message = doc.element(reason, "message")
        if reason_message is not None:
            sections.append(doc.text(reason_message).strip())

    output = doc.element(test_case, "output")
    if output is not None:
        sections.append(
            DELIMITER + "EXECUTE STEPS:\n" + doc.text(output).strip() + DELIMITER
        )

    return "".join(sections)


def get_screenshot_links(doc: NUnitDocument, test_case: ET.Element) -> List[str]:
    output = doc.element(test_case, "output")
    if output is None:
        return []
    return SCREENSHOT_RE.findall(doc.text(output).strip())


def build_test(
    doc: NUnitDocument, test_case: ET.Element, suite_categories: Set[str]
) -> Test:
    duration = doc.attribute(test_case, "duration")
    return Test(
        method_name=required(doc, test_case, "methodname"),
        name=required(doc, test_case, "name"),
        status=to_status(required(doc, test_case, "result")),
        start_time=start_time(doc, test_case),
        end_time=end_time(doc, test_case),
        duration=format_duration(duration) if duration else None,
        description=get_description(doc, test_case),
        categories=resolve_test_categories(doc, test_case, suite_categories),
        status_message=build_status_message(doc, test_case),
        screenshot_links=get_screenshot_links(doc, test_case),
    )
