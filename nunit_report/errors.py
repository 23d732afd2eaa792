# nunit_report/errors.py
"""Errors raised while turning an NUnit result document into a Report.

Only defects that have no fallback are raised; every optional attribute the
two NUnit dialects disagree on is handled by the normalizers instead.
"""

from __future__ import annotations

from typing import Optional


class ReportParseError(Exception):
    """Base class; aborts the parse of one document."""

    def __init__(self, message: str, file_name: Optional[str] = None):
        super().__init__(message)
        self.file_name = file_name


class MissingFieldError(ReportParseError):
    def __init__(self, field: str, node: str, file_name: Optional[str] = None):
        super().__init__(f"<{node}> is missing required attribute '{field}'", file_name)
        self.field = field
        self.node = node


class UnknownStatusError(ReportParseError, ValueError):
    def __init__(self, token: str, file_name: Optional[str] = None):
        super().__init__(f"unrecognized test result '{token}'", file_name)
        self.token = token


class MalformedDurationError(ReportParseError, ValueError):
    def __init__(self, value: str, file_name: Optional[str] = None):
        super().__init__(f"duration '{value}' is not a number of seconds", file_name)
        self.value = value


class MalformedCountError(ReportParseError, ValueError):
    def __init__(self, field: str, value: str, file_name: Optional[str] = None):
        super().__init__(f"count '{field}' has non-integer value '{value}'", file_name)
        self.field = field
        self.value = value
