"""
Tests para cashflow_report.domain.services.settlement_calendar

Calendario de referencia (enero 2016):
    vie 01, sáb 02, dom 03, lun 04, mar 05, mié 06, jue 07
"""

from datetime import date, timedelta

import pytest

from cashflow_report.domain.services.settlement_calendar import (
    FRIDAY_SATURDAY_CURRENCIES,
    WeekendConvention,
    compute_actual_settlement_date,
    shift_past_weekend,
    weekend_convention_for,
)

VIERNES = date(2016, 1, 1)
SABADO = date(2016, 1, 2)
DOMINGO = date(2016, 1, 3)
LUNES = date(2016, 1, 4)
JUEVES = date(2016, 1, 7)


class TestWeekendConventionFor:
    @pytest.mark.parametrize("currency", ["AED", "SAR", "aed", "Sar", " AED "])
    def test_monedas_viernes_sabado(self, currency):
        assert weekend_convention_for(currency) is WeekendConvention.FRIDAY_SATURDAY

    @pytest.mark.parametrize("currency", ["USD", "SGP", "EUR", "GBP"])
    def test_monedas_sabado_domingo(self, currency):
        assert weekend_convention_for(currency) is WeekendConvention.SATURDAY_SUNDAY

    def test_moneda_desconocida_usa_sabado_domingo(self):
        assert weekend_convention_for("XYZ") is WeekendConvention.SATURDAY_SUNDAY

    def test_moneda_vacia_usa_sabado_domingo(self):
        assert weekend_convention_for("") is WeekendConvention.SATURDAY_SUNDAY

    def test_none_lanza_error(self):
        with pytest.raises(ValueError, match="None"):
            weekend_convention_for(None)  # type: ignore

    def test_conjunto_fijo(self):
        assert FRIDAY_SATURDAY_CURRENCIES == frozenset({"AED", "SAR"})


class TestComputeActualSettlementDate:
    """Reglas de desplazamiento por convención."""

    # --- Viernes/sábado (AED, SAR) ---

    @pytest.mark.parametrize("currency", ["AED", "SAR"])
    def test_viernes_avanza_dos_dias(self, currency):
        assert compute_actual_settlement_date(VIERNES, currency) == DOMINGO

    @pytest.mark.parametrize("currency", ["AED", "SAR"])
    def test_sabado_avanza_un_dia(self, currency):
        assert compute_actual_settlement_date(SABADO, currency) == DOMINGO

    @pytest.mark.parametrize("currency", ["AED", "SAR"])
    def test_domingo_es_habil(self, currency):
        assert compute_actual_settlement_date(DOMINGO, currency) == DOMINGO

    # --- Sábado/domingo (resto) ---

    def test_sabado_avanza_dos_dias(self):
        assert compute_actual_settlement_date(SABADO, "SGP") == LUNES

    def test_domingo_avanza_un_dia(self):
        assert compute_actual_settlement_date(DOMINGO, "SGP") == LUNES

    def test_viernes_es_habil(self):
        assert compute_actual_settlement_date(VIERNES, "USD") == VIERNES

    def test_dia_habil_sin_cambio(self):
        assert compute_actual_settlement_date(JUEVES, "SGP") == JUEVES
        assert compute_actual_settlement_date(JUEVES, "AED") == JUEVES

    def test_minusculas_aplican_viernes_sabado(self):
        assert compute_actual_settlement_date(VIERNES, "aed") == DOMINGO

    def test_cruza_fin_de_mes(self):
        """Sábado 30 de enero de 2016 → lunes 1 de febrero."""
        assert compute_actual_settlement_date(date(2016, 1, 30), "USD") == date(2016, 2, 1)

    def test_cruza_fin_de_año(self):
        """Viernes 30 de diciembre de 2016 con AED → domingo 1 de enero."""
        assert compute_actual_settlement_date(date(2016, 12, 30), "AED") == date(2017, 1, 1)

    @pytest.mark.parametrize("convention", list(WeekendConvention))
    def test_resultado_nunca_cae_en_fin_de_semana(self, convention):
        """Un solo salto basta para los dos fines de semana de 2 días."""
        weekend = (
            {4, 5} if convention is WeekendConvention.FRIDAY_SATURDAY else {5, 6}
        )
        for offset in range(14):
            day = LUNES + timedelta(days=offset)
            shifted = shift_past_weekend(day, convention)
            assert shifted.weekday() not in weekend
            assert 0 <= (shifted - day).days <= 2

    def test_fin_del_calendario_lanza_value_error(self):
        """Viernes 31 dic 9999 con AED: el día hábil no cabe en date."""
        with pytest.raises(ValueError, match="fuera de rango"):
            compute_actual_settlement_date(date.max, "AED")

    def test_fin_del_calendario_sin_desplazamiento(self):
        assert compute_actual_settlement_date(date.max, "SGP") == date.max
