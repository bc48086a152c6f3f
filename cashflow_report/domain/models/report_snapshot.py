"""
Modelo de dominio: Vistas materializadas del reporte.

ReportSnapshot es el "contrato" entre el ReportEngine y los ReportWriter:
el engine lo produce a partir de sus ledgers y cualquier escritor (Excel
hoy) lo consume sin conocer los ledgers.
"""

from dataclasses import dataclass
from decimal import Decimal

from cashflow_report.domain.models.daily_summary import DailySummary


@dataclass(frozen=True)
class RankingEntry:
    """Una fila del ranking: entidad y su total en la dirección pedida."""

    entity_name: str
    total: Decimal


@dataclass(frozen=True)
class ReportSnapshot:
    """Las tres vistas del reporte, ya ordenadas."""

    daily_summaries: tuple[DailySummary, ...]
    """Resúmenes diarios, del más reciente al más antiguo."""

    incoming_ranking: tuple[RankingEntry, ...]
    """Entidades por total entrante descendente."""

    outgoing_ranking: tuple[RankingEntry, ...]
    """Entidades por total saliente descendente."""

    @property
    def total_incoming(self) -> Decimal:
        return sum((d.incoming for d in self.daily_summaries), Decimal("0"))

    @property
    def total_outgoing(self) -> Decimal:
        return sum((d.outgoing for d in self.daily_summaries), Decimal("0"))

    @property
    def is_empty(self) -> bool:
        return not self.daily_summaries
