"""
Tests para cashflow_report.domain.shared.date_parser

El feed usa "dd MMM yyyy" con meses en inglés: "01 Jan 2016".
"""

from datetime import date

import pytest

from cashflow_report.domain.shared.date_parser import format_feed_date, parse_feed_date


class TestParseFeedDate:
    def test_formato_basico(self):
        assert parse_feed_date("02 Jan 2016") == date(2016, 1, 2)

    def test_espacios_alrededor(self):
        assert parse_feed_date("  31 Dec 2016 ") == date(2016, 12, 31)

    def test_bisiesto(self):
        assert parse_feed_date("29 Feb 2016") == date(2016, 2, 29)

    def test_texto_vacio_lanza_error(self):
        with pytest.raises(ValueError, match="vacío"):
            parse_feed_date("")

    @pytest.mark.parametrize(
        "text",
        ["2016-01-02", "2 Jan 2016", "02 January 2016", "02/Jan/2016", "02 Jan 16"],
    )
    def test_formato_no_reconocido(self, text):
        with pytest.raises(ValueError, match="no reconocido"):
            parse_feed_date(text)

    def test_mes_invalido(self):
        with pytest.raises(ValueError, match="Mes no reconocido"):
            parse_feed_date("02 Ene 2016")

    @pytest.mark.parametrize("text", ["04 jan 2016", "07 MAR 2016"])
    def test_mes_respeta_mayusculas(self, text):
        with pytest.raises(ValueError, match="Mes no reconocido"):
            parse_feed_date(text)

    def test_fecha_inexistente(self):
        with pytest.raises(ValueError, match="Fecha inválida"):
            parse_feed_date("30 Feb 2016")


class TestFormatFeedDate:
    def test_formato(self):
        assert format_feed_date(date(2016, 1, 4)) == "04 Jan 2016"

    def test_ida_y_vuelta(self):
        assert format_feed_date(parse_feed_date("09 Oct 2016")) == "09 Oct 2016"
