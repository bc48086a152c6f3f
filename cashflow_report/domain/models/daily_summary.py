"""
Modelo de dominio: Resumen diario.

Totales de efectivo entrante y saliente de una fecha de liquidación,
sumando todas las entidades. Solo existe para fechas con al menos una
transacción; el DailyLedger lo crea la primera vez que ve la fecha.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from cashflow_report.domain.models.cashflow_direction import CashflowDirection


@dataclass
class DailySummary:
    """Totales acumulados de un día."""

    date: date
    incoming: Decimal = Decimal("0")
    outgoing: Decimal = Decimal("0")

    def add(self, direction: CashflowDirection, amount: Decimal) -> None:
        """Suma amount al total de la dirección indicada.

        Los totales solo crecen: no se aceptan montos negativos.
        """
        if amount < Decimal("0"):
            raise ValueError(f"amount no puede ser negativo: {amount}")

        if direction is CashflowDirection.INCOMING:
            self.incoming += amount
        elif direction is CashflowDirection.OUTGOING:
            self.outgoing += amount
        else:
            raise ValueError(f"direction inválida: {direction!r}")

    @property
    def net(self) -> Decimal:
        """incoming - outgoing."""
        return self.incoming - self.outgoing
