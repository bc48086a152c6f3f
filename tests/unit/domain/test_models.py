"""
Tests para los modelos de dominio.

Verifican validaciones, propiedades derivadas e inmutabilidad.
"""

from datetime import date
from decimal import Decimal

import pytest

from cashflow_report.domain.models import (
    CashflowDirection,
    DailySummary,
    Entity,
    LineParseResult,
    RankingEntry,
    ReportSnapshot,
    Transaction,
)

IN = CashflowDirection.INCOMING
OUT = CashflowDirection.OUTGOING


def _tx(name="foo", direction=OUT, value="100", day=date(2016, 1, 4)) -> Transaction:
    return Transaction(
        entity_name=name,
        direction=direction,
        usd_value=Decimal(value),
        actual_settlement_date=day,
    )


class TestCashflowDirection:
    def test_marcador_s_es_entrante(self):
        assert CashflowDirection.from_marker("S") is IN

    def test_marcador_b_es_saliente(self):
        assert CashflowDirection.from_marker("B") is OUT

    @pytest.mark.parametrize("marker", ["YY", "s", "b", "", " S", "SB"])
    def test_marcador_invalido(self, marker):
        assert CashflowDirection.from_marker(marker) is None

    def test_etiquetas(self):
        assert IN.label == "Incoming"
        assert OUT.label == "Outgoing"


class TestTransaction:
    def test_crear_basica(self):
        tx = _tx()
        assert tx.entity_name == "foo"
        assert tx.direction is OUT
        assert tx.usd_value == Decimal("100")

    def test_es_inmutable(self):
        tx = _tx()
        with pytest.raises(AttributeError):
            tx.entity_name = "bar"  # type: ignore

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_entidad_invalida_lanza_error(self, name):
        with pytest.raises(ValueError, match="entity_name"):
            _tx(name=name)

    def test_direccion_invalida_lanza_error(self):
        with pytest.raises(ValueError, match="direction"):
            _tx(direction="B")

    def test_fecha_invalida_lanza_error(self):
        with pytest.raises(ValueError, match="actual_settlement_date"):
            _tx(day=None)

    def test_valor_negativo_lanza_error(self):
        with pytest.raises(ValueError, match="negativo"):
            _tx(value="-1")

    def test_valor_cero_es_valido(self):
        assert _tx(value="0").usd_value == Decimal("0")


class TestTransactionFromTrade:
    def test_escenario_foo(self):
        """foo,B,0.50,SGP,01 Jan 2016,02 Jan 2016,200,100.25"""
        tx = Transaction.from_trade(
            entity_name="foo",
            direction=OUT,
            agreed_fx=Decimal("0.50"),
            currency="SGP",
            desired_settlement_date=date(2016, 1, 2),
            units=200,
            price_per_unit=Decimal("100.25"),
        )
        assert tx.usd_value == Decimal("10025.00")
        assert tx.actual_settlement_date == date(2016, 1, 4)
        assert tx.direction is OUT

    def test_aed_viernes(self):
        tx = Transaction.from_trade("bar", IN, Decimal("1"), "AED", date(2016, 10, 7), 1, Decimal("1"))
        assert tx.actual_settlement_date == date(2016, 10, 9)

    def test_precision_decimal(self):
        tx = Transaction.from_trade("x", IN, Decimal("0.1"), "USD", date(2016, 1, 4), 3, Decimal("0.1"))
        assert tx.usd_value == Decimal("0.03")

    @pytest.mark.parametrize("currency", [None, "", "  "])
    def test_moneda_invalida_lanza_error(self, currency):
        with pytest.raises(ValueError, match="currency"):
            Transaction.from_trade("x", IN, Decimal("1"), currency, date(2016, 1, 4), 1, Decimal("1"))

    def test_fecha_deseada_invalida_lanza_error(self):
        with pytest.raises(ValueError, match="desired_settlement_date"):
            Transaction.from_trade("x", IN, Decimal("1"), "USD", None, 1, Decimal("1"))


class TestEntity:
    def test_sin_transacciones_reporta_cero(self):
        entity = Entity("foo")
        assert entity.total_directed_cashflow(IN) == Decimal("0")
        assert entity.total_directed_cashflow(OUT) == Decimal("0")

    def test_total_por_direccion(self):
        entity = Entity("foo")
        entity.add_transaction(_tx(direction=OUT, value="100"))
        entity.add_transaction(_tx(direction=OUT, value="50.5"))
        entity.add_transaction(_tx(direction=IN, value="7"))

        assert entity.total_directed_cashflow(OUT) == Decimal("150.5")
        assert entity.total_directed_cashflow(IN) == Decimal("7")
        assert len(entity.transactions) == 3

    def test_transaccion_de_otra_entidad_lanza_error(self):
        entity = Entity("foo")
        with pytest.raises(ValueError, match="no pertenece"):
            entity.add_transaction(_tx(name="bar"))


class TestDailySummary:
    def test_empieza_en_cero(self):
        summary = DailySummary(date(2016, 1, 4))
        assert summary.incoming == Decimal("0")
        assert summary.outgoing == Decimal("0")

    def test_acumula_por_direccion(self):
        summary = DailySummary(date(2016, 1, 4))
        summary.add(IN, Decimal("10"))
        summary.add(OUT, Decimal("10025"))
        summary.add(OUT, Decimal("250"))

        assert summary.incoming == Decimal("10")
        assert summary.outgoing == Decimal("10275")
        assert summary.net == Decimal("-10265")

    def test_monto_negativo_lanza_error(self):
        summary = DailySummary(date(2016, 1, 4))
        with pytest.raises(ValueError, match="negativo"):
            summary.add(IN, Decimal("-1"))


class TestLineParseResult:
    def test_parseado(self):
        result = LineParseResult.parsed(_tx())
        assert result.is_parsed
        assert result.reason == ""

    def test_rechazado(self):
        result = LineParseResult.rejected("campos incompletos")
        assert not result.is_parsed
        assert result.transaction is None
        assert result.reason == "campos incompletos"

    def test_rechazado_sin_motivo_usa_default(self):
        assert LineParseResult.rejected("").reason == "línea no parseable"

    def test_no_puede_tener_ambos(self):
        with pytest.raises(ValueError):
            LineParseResult(transaction=_tx(), reason="x")

    def test_no_puede_estar_vacio(self):
        with pytest.raises(ValueError):
            LineParseResult()


class TestReportSnapshot:
    def test_totales(self):
        d1 = DailySummary(date(2016, 1, 7), incoming=Decimal("5"))
        d2 = DailySummary(date(2016, 1, 4), incoming=Decimal("1"), outgoing=Decimal("3"))
        snapshot = ReportSnapshot(
            daily_summaries=(d1, d2),
            incoming_ranking=(RankingEntry("a", Decimal("6")),),
            outgoing_ranking=(RankingEntry("a", Decimal("3")),),
        )
        assert snapshot.total_incoming == Decimal("6")
        assert snapshot.total_outgoing == Decimal("3")
        assert not snapshot.is_empty

    def test_vacio(self):
        snapshot = ReportSnapshot((), (), ())
        assert snapshot.is_empty
        assert snapshot.total_incoming == Decimal("0")
