"""
Modelo de dominio: Entidad (contraparte).

Una Entity se crea la primera vez que aparece su nombre en una transacción
y acumula todas las transacciones con ese nombre. A diferencia de los demás
modelos NO es inmutable: el EntityLedger le va agregando transacciones
mientras se procesa el feed.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from cashflow_report.domain.models.cashflow_direction import CashflowDirection
from cashflow_report.domain.models.transaction import Transaction


@dataclass
class Entity:
    """Contraparte y sus transacciones."""

    name: str
    transactions: list[Transaction] = field(default_factory=list)

    def add_transaction(self, transaction: Transaction) -> None:
        """Agrega una transacción a la entidad.

        Raises:
            ValueError: Si la transacción es de otra entidad.
        """
        if transaction.entity_name != self.name:
            raise ValueError(
                f"La transacción de '{transaction.entity_name}' no pertenece "
                f"a la entidad '{self.name}'"
            )
        self.transactions.append(transaction)

    def total_directed_cashflow(self, direction: CashflowDirection) -> Decimal:
        """Suma de usd_value de las transacciones en la dirección pedida.

        Una entidad sin transacciones en esa dirección devuelve Decimal("0").
        """
        return sum(
            (t.usd_value for t in self.transactions if t.direction is direction),
            Decimal("0"),
        )
