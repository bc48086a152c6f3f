"""
Servicio de dominio: Libro de entidades.

Agrupa las transacciones por contraparte. Una Entity se crea la primera
vez que se ve su nombre y se conserva el orden en que aparecieron: ese
orden es el desempate del ranking cuando dos entidades tienen el mismo
total (sorted() es estable).
"""

from collections.abc import Iterator
from decimal import Decimal

from cashflow_report.domain.models.cashflow_direction import CashflowDirection
from cashflow_report.domain.models.entity import Entity
from cashflow_report.domain.models.transaction import Transaction


class EntityLedger:
    """Mapa nombre → Entity, en orden de primera aparición."""

    def __init__(self) -> None:
        self._entities: dict[str, Entity] = {}

    def get_or_create(self, name: str) -> Entity:
        """Devuelve la Entity con ese nombre, creándola si no existe."""
        entity = self._entities.get(name)
        if entity is None:
            entity = Entity(name)
            self._entities[name] = entity
        return entity

    def add_transaction(self, transaction: Transaction) -> Entity:
        """Agrega la transacción a su entidad y devuelve la entidad."""
        entity = self.get_or_create(transaction.entity_name)
        entity.add_transaction(transaction)
        return entity

    def ranked_by(self, direction: CashflowDirection) -> list[Entity]:
        """Entidades ordenadas por total descendente en la dirección pedida.

        Incluye TODAS las entidades conocidas, aunque su total en esa
        dirección sea 0. Empates: orden de primera aparición.
        """
        return sorted(
            self._entities.values(),
            key=lambda entity: entity.total_directed_cashflow(direction),
            reverse=True,
        )

    def total(self, direction: CashflowDirection) -> Decimal:
        """Suma del total dirigido de todas las entidades."""
        return sum(
            (e.total_directed_cashflow(direction) for e in self._entities.values()),
            Decimal("0"),
        )

    def get(self, name: str) -> Entity | None:
        return self._entities.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._entities

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities.values())

    def __len__(self) -> int:
        return len(self._entities)
