from .errors import (
    MalformedCountError,
    MalformedDurationError,
    MissingFieldError,
    ReportParseError,
    UnknownStatusError,
)
from .models import Report, RunInfo, Status, Test, TestRunner, TestSuite
from .parser import parse_document, parse_file

__all__ = [
    "parse_document",
    "parse_file",
    "Report",
    "RunInfo",
    "Status",
    "Test",
    "TestRunner",
    "TestSuite",
    "ReportParseError",
    "MissingFieldError",
    "UnknownStatusError",
    "MalformedDurationError",
    "MalformedCountError",
]
