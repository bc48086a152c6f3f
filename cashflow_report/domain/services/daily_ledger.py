"""
Servicio de dominio: Libro diario.

Acumula, por fecha real de liquidación, el efectivo entrante y saliente de
todas las entidades. Solo existen entradas para fechas con al menos una
transacción.
"""

from datetime import date
from decimal import Decimal

from cashflow_report.domain.models.cashflow_direction import CashflowDirection
from cashflow_report.domain.models.daily_summary import DailySummary


class DailyLedger:
    """Mapa fecha → DailySummary."""

    def __init__(self) -> None:
        self._summaries: dict[date, DailySummary] = {}

    def add_to_daily_summary(
        self, day: date, direction: CashflowDirection, amount: Decimal
    ) -> DailySummary:
        """Suma amount al total de la dirección en la fecha indicada.

        Crea el DailySummary de la fecha si todavía no existe.
        """
        summary = self._summaries.get(day)
        if summary is None:
            summary = DailySummary(day)
            self._summaries[day] = summary
        summary.add(direction, amount)
        return summary

    def chronological_descending(self) -> list[date]:
        """Fechas con movimientos, de la más reciente a la más antigua."""
        return sorted(self._summaries, reverse=True)

    def get(self, day: date) -> DailySummary | None:
        return self._summaries.get(day)

    def __contains__(self, day: object) -> bool:
        return day in self._summaries

    def __len__(self) -> int:
        return len(self._summaries)
