# nunit_report/document.py
"""
Read-only lookups over a parsed NUnit result tree.

NUnit 2 and NUnit 3 disagree on which attributes exist, so every lookup
here returns None/empty instead of raising when something is absent.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Dict, List, Optional


class NUnitDocument:
    def __init__(self, root: ET.Element):
        self.root = root
        # ElementTree has no parent pointers; ancestors() walks this instead
        self._parents: Dict[ET.Element, ET.Element] = {
            child: parent for parent in root.iter() for child in parent
        }

    @staticmethod
    def attribute(node: ET.Element, name: str) -> Optional[str]:
        return node.attrib.get(name)

    @staticmethod
    def elements(node: ET.Element, tag: str) -> List[ET.Element]:
        return node.findall(tag)

    @staticmethod
    def element(node: ET.Element, tag: str) -> Optional[ET.Element]:
        return node.find(tag)

    @staticmethod
    def descendants(node: ET.Element, tag: str) -> List[ET.Element]:
        """All `tag` nodes under `node` in document order, `node` included if it matches."""
        return list(node.iter(tag))

    def ancestors(self, node: ET.Element, tag: str) -> List[ET.Element]:
        """`tag` ancestors of `node`, nearest first."""
        found: List[ET.Element] = []
        parent = self._parents.get(node)
        while parent is not None:
            if parent.tag == tag:
                found.append(parent)
            parent = self._parents.get(parent)
        return found

    def first(self, tag: str) -> Optional[ET.Element]:
        return next(self.root.iter(tag), None)

    @staticmethod
    def text(node: Optional[ET.Element]) -> str:
        if node is None:
            return ""
        return "".join(node.itertext())


def attr_equals(node: ET.Element, name: str, expected: str) -> bool:
    """Case-insensitive attribute comparison; a missing attribute never matches."""
    value = node.attrib.get(name)
    return value is not None and value.casefold() == expected.casefold()
