"""Token reporting.

Exports the reporter, its configuration, and the token serializer.
"""
from __future__ import annotations

from relex.report.reporter import OUTPUT_FORMATS, ReportConfig, ScanReport, TokenReporter
from relex.report.serializer import TokenSerializer

__all__ = [
    "TokenReporter",
    "ReportConfig",
    "ScanReport",
    "TokenSerializer",
    "OUTPUT_FORMATS",
]
