# nunit_report/categories.py
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List, Set

from .document import NUnitDocument, attr_equals


def get_categories(doc: NUnitDocument, node: ET.Element) -> Set[str]:
    """Category values from the node's own <properties> block (not nested suites/cases)."""
    categories: Set[str] = set()
    for props in doc.elements(node, "properties"):
        for prop in doc.elements(props, "property"):
            if not attr_equals(prop, "name", "Category"):
                continue
            value = doc.attribute(prop, "value")
            if value is not None:
                categories.add(value)
    return categories


def resolve_test_categories(
    doc: NUnitDocument, test_case: ET.Element, suite_categories: Set[str]
) -> List[str]:
    """
    Own categories, plus those of the nearest ParameterizedTest suite above
    the test case, plus the fixture's.
    """
    categories = get_categories(doc, test_case)

    for ancestor in doc.ancestors(test_case, "test-suite"):
        if attr_equals(ancestor, "type", "ParameterizedTest"):
            categories |= get_categories(doc, ancestor)
            break

    categories |= suite_categories
    return sorted(categories)
