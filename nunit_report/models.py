# nunit_report/models.py
"""
Normalized report model handed to the renderer.

Every value here is built within a single parse call and never mutated
afterwards.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Status(str, Enum):
    PASSED = "Passed"
    FAILED = "Failed"
    ERROR = "Error"
    INCONCLUSIVE = "Inconclusive"
    SKIPPED = "Skipped"
    IGNORED = "Ignored"


class TestRunner(str, Enum):
    NUNIT = "NUnit"


class RunInfo(BaseModel):
    """Environment/run metadata shown once per report."""

    test_runner: Optional[TestRunner] = None
    # insertion order is display order
    info: Dict[str, str] = Field(default_factory=dict)


class Test(BaseModel):
    __test__ = False  # not a pytest class

    method_name: str
    name: str
    status: Status
    start_time: str = ""
    end_time: str = ""
    duration: Optional[str] = None  # hh:mm:ss:fff, None when not reported
    description: str = ""
    categories: List[str] = Field(default_factory=list)
    status_message: str = ""
    screenshot_links: List[str] = Field(default_factory=list)


class TestSuite(BaseModel):
    __test__ = False

    name: str
    start_time: str = ""
    end_time: str = ""
    status: Status = Status.PASSED
    status_message: str = ""
    tests: List[Test] = Field(default_factory=list)


class Report(BaseModel):
    file_name: str
    assembly_name: Optional[str] = None
    test_runner: TestRunner = TestRunner.NUNIT
    run_info: Optional[RunInfo] = None

    # read from the document when present, so total may differ from the
    # number of Test records
    total: int = 0
    passed: int = 0
    failed: int = 0
    errors: int = 0
    inconclusive: int = 0
    skipped: int = 0

    start_time: str = ""
    end_time: str = ""
    status_message: str = ""

    suites: List[TestSuite] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    # one entry per test, feeds the status filter
    statuses: List[Status] = Field(default_factory=list)
