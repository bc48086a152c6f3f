"""
Modelo de dominio: Transacción.

Una Transaction representa una operación individual del feed, ya
convertida a lo único que necesitan los reportes:
- Con quién se operó (entity_name).
- En qué dirección se movió el efectivo (direction).
- Cuánto vale en USD (usd_value).
- Cuándo se liquida realmente (actual_settlement_date).

La moneda, el tipo de cambio, las unidades y el precio solo sirven para
calcular usd_value y actual_settlement_date, así que no se guardan.
Para construir una Transaction a partir de los términos crudos de la
operación se usa Transaction.from_trade().
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from cashflow_report.domain.models.cashflow_direction import CashflowDirection
from cashflow_report.domain.services.settlement_calendar import (
    compute_actual_settlement_date,
)


@dataclass(frozen=True)
class Transaction:
    """Operación ya valuada en USD y con su fecha real de liquidación."""

    entity_name: str
    """Contraparte de la operación. Nunca vacía."""

    direction: CashflowDirection
    """INCOMING para ventas, OUTGOING para compras."""

    usd_value: Decimal
    """price_per_unit × units × agreed_fx. Siempre >= 0."""

    actual_settlement_date: date
    """Fecha deseada ajustada por el fin de semana de la moneda."""

    def __post_init__(self) -> None:
        if not isinstance(self.entity_name, str) or not self.entity_name.strip():
            raise ValueError(f"entity_name inválido: {self.entity_name!r}")
        if not isinstance(self.direction, CashflowDirection):
            raise ValueError(f"direction inválida: {self.direction!r}")
        if not isinstance(self.actual_settlement_date, date):
            raise ValueError(
                f"actual_settlement_date inválida: {self.actual_settlement_date!r}"
            )
        if not isinstance(self.usd_value, Decimal):
            raise ValueError(f"usd_value debe ser Decimal: {self.usd_value!r}")
        if self.usd_value < Decimal("0"):
            raise ValueError(f"usd_value no puede ser negativo: {self.usd_value}")

    @classmethod
    def from_trade(
        cls,
        entity_name: str,
        direction: CashflowDirection,
        agreed_fx: Decimal,
        currency: str,
        desired_settlement_date: date,
        units: int,
        price_per_unit: Decimal,
    ) -> "Transaction":
        """Construye una Transaction a partir de los términos de la operación.

        Args:
            entity_name: Contraparte.
            direction: Dirección del flujo.
            agreed_fx: Tipo de cambio acordado de la moneda a USD.
            currency: Código de moneda; solo decide el fin de semana.
            desired_settlement_date: Fecha en la que se desea liquidar.
            units: Número de unidades.
            price_per_unit: Precio por unidad en la moneda de la operación.

        Raises:
            ValueError: Si falta la moneda o la fecha, o si el resultado
                        viola alguna validación de Transaction.
        """
        if currency is None or not currency.strip():
            raise ValueError(f"currency inválida: {currency!r}")
        if not isinstance(desired_settlement_date, date):
            raise ValueError(
                f"desired_settlement_date inválida: {desired_settlement_date!r}"
            )

        return cls(
            entity_name=entity_name,
            direction=direction,
            usd_value=price_per_unit * units * agreed_fx,
            actual_settlement_date=compute_actual_settlement_date(
                desired_settlement_date, currency
            ),
        )
