"""
Modelo de dominio: Resultado del parseo de una línea del feed.

Una línea mal formada es un caso ESPERADO del feed, no un error del
programa. El RecordParser no lanza excepciones hacia el ReportEngine:
devuelve un LineParseResult con la Transaction o con el motivo del
rechazo, y el engine descarta explícitamente los rechazados.
"""

from dataclasses import dataclass

from cashflow_report.domain.models.transaction import Transaction


@dataclass(frozen=True)
class LineParseResult:
    """Transacción parseada o motivo de rechazo. Nunca ambos."""

    transaction: Transaction | None = None
    reason: str = ""

    @classmethod
    def parsed(cls, transaction: Transaction) -> "LineParseResult":
        return cls(transaction=transaction)

    @classmethod
    def rejected(cls, reason: str) -> "LineParseResult":
        return cls(reason=reason or "línea no parseable")

    @property
    def is_parsed(self) -> bool:
        return self.transaction is not None

    def __post_init__(self) -> None:
        if self.transaction is not None and self.reason:
            raise ValueError("Un resultado parseado no puede tener motivo de rechazo")
        if self.transaction is None and not self.reason:
            raise ValueError("Un resultado rechazado necesita un motivo")
