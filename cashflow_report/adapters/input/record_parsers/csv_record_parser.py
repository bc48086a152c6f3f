"""
Adaptador de entrada: Parser CSV del feed de operaciones.

Cada línea tiene exactamente 8 campos separados por coma:

    foo,B,0.50,SGP,01 Jan 2016,02 Jan 2016,200,100.25
    │   │ │    │   │           │           │   └─ precio por unidad
    │   │ │    │   │           │           └───── unidades (entero)
    │   │ │    │   │           └───────────────── fecha deseada de liquidación
    │   │ │    │   └───────────────────────────── fecha de operación
    │   │ │    └───────────────────────────────── moneda
    │   │ └────────────────────────────────────── tipo de cambio acordado
    │   └──────────────────────────────────────── S = venta, B = compra
    └──────────────────────────────────────────── entidad

Los espacios alrededor de cada campo se ignoran. La fecha de operación se
valida pero no se usa en ningún reporte.

Internamente cada helper lanza ValueError / LineParseError; parse_line()
los atrapa y devuelve un LineParseResult rechazado con el motivo.
"""

from cashflow_report.domain.exceptions import LineParseError
from cashflow_report.domain.models.cashflow_direction import CashflowDirection
from cashflow_report.domain.models.line_parse_result import LineParseResult
from cashflow_report.domain.models.transaction import Transaction
from cashflow_report.domain.ports.record_parser import RecordParser
from cashflow_report.domain.shared.date_parser import parse_feed_date
from cashflow_report.domain.shared.money import parse_decimal, parse_units

FIELD_COUNT = 8
SEPARATOR = ","


class CsvRecordParser(RecordParser):
    """Parser de líneas CSV de 8 campos."""

    def parse_line(self, raw_line: str) -> LineParseResult:
        if raw_line is None:
            raise TypeError("raw_line no puede ser None")
        if not isinstance(raw_line, str):
            raise TypeError(f"parse_line espera str, recibió {type(raw_line).__name__}")

        try:
            transaction = self._to_transaction(raw_line)
        except (LineParseError, ValueError) as e:
            return LineParseResult.rejected(str(e))

        return LineParseResult.parsed(transaction)

    def _to_transaction(self, raw_line: str) -> Transaction:
        fields = [f.strip() for f in raw_line.split(SEPARATOR)]

        if len(fields) != FIELD_COUNT:
            raise LineParseError(
                raw_line, f"se esperaban {FIELD_COUNT} campos, hay {len(fields)}"
            )

        (
            entity_name,
            marker,
            agreed_fx_text,
            currency,
            trade_date_text,
            settlement_date_text,
            units_text,
            price_text,
        ) = fields

        if not entity_name:
            raise LineParseError(raw_line, "entidad vacía")

        direction = CashflowDirection.from_marker(marker)
        if direction is None:
            raise LineParseError(raw_line, f"marcador de dirección inválido: '{marker}'")

        if not currency:
            raise LineParseError(raw_line, "moneda vacía")

        agreed_fx = parse_decimal(agreed_fx_text)
        parse_feed_date(trade_date_text)
        desired_settlement_date = parse_feed_date(settlement_date_text)
        units = parse_units(units_text)
        price_per_unit = parse_decimal(price_text)

        # El producto de dos negativos sería positivo; se rechaza cada término.
        for nombre, valor in (
            ("tipo de cambio", agreed_fx),
            ("unidades", units),
            ("precio", price_per_unit),
        ):
            if valor < 0:
                raise LineParseError(raw_line, f"{nombre} negativo: {valor}")

        return Transaction.from_trade(
            entity_name=entity_name,
            direction=direction,
            agreed_fx=agreed_fx,
            currency=currency,
            desired_settlement_date=desired_settlement_date,
            units=units,
            price_per_unit=price_per_unit,
        )
