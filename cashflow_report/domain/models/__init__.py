"""
Modelos de dominio del proyecto cashflow-report.

Transaction, LineParseResult, RankingEntry y ReportSnapshot son dataclasses
inmutables (frozen=True). Entity y DailySummary son acumuladores: los
ledgers las mutan mientras se procesa el feed.

Uso:
    from cashflow_report.domain.models import Transaction, CashflowDirection
"""

from cashflow_report.domain.models.cashflow_direction import CashflowDirection
from cashflow_report.domain.models.daily_summary import DailySummary
from cashflow_report.domain.models.entity import Entity
from cashflow_report.domain.models.line_parse_result import LineParseResult
from cashflow_report.domain.models.report_snapshot import RankingEntry, ReportSnapshot
from cashflow_report.domain.models.transaction import Transaction

__all__ = [
    "CashflowDirection",
    "DailySummary",
    "Entity",
    "LineParseResult",
    "RankingEntry",
    "ReportSnapshot",
    "Transaction",
]
