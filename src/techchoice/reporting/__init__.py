"""Reporting traversal and tabular reports."""

from techchoice.reporting.report import REPORT_COLUMNS, EmissionsReportVisitor, ReportRow
from techchoice.reporting.visitor import Visitor

__all__ = ["Visitor", "EmissionsReportVisitor", "ReportRow", "REPORT_COLUMNS"]
