"""
Conversión de fechas del feed de operaciones.

El feed trae dos fechas por línea (fecha de operación y fecha deseada de
liquidación), ambas con el formato "dd MMM yyyy":

    "01 Jan 2016", "07 Mar 2016"

Los reportes imprimen las fechas de liquidación con el mismo formato, así
que este módulo ofrece ambas direcciones: texto → date y date → texto.
"""

import re
from datetime import date

from cashflow_report.domain.shared.month_map import month_abbreviation, month_to_int

_FEED_DATE = re.compile(r"^(\d{2}) ([A-Za-z]{3}) (\d{4})$", re.ASCII)


def parse_feed_date(date_text: str) -> date:
    """Parsea una fecha "dd MMM yyyy" a un objeto date.

    El día siempre lleva 2 dígitos y el año 4, igual que en el feed.

    Raises:
        ValueError: Si el texto no tiene el formato o la fecha no existe
                    (por ejemplo, "30 Feb 2016").

    Ejemplos:
        >>> parse_feed_date("02 Jan 2016")
        datetime.date(2016, 1, 2)
    """
    text = date_text.strip()
    if not text:
        raise ValueError("El texto de fecha está vacío")

    m = _FEED_DATE.match(text)
    if not m:
        raise ValueError(
            f"Formato de fecha no reconocido: '{text}'. Se esperaba 'dd MMM yyyy'"
        )

    day = int(m.group(1))
    month = month_to_int(m.group(2))
    year = int(m.group(3))
    return _build_date(year, month, day, text)


def format_feed_date(value: date) -> str:
    """Formatea un date como "dd MMM yyyy", independiente del locale.

    Ejemplos:
        >>> format_feed_date(date(2016, 1, 4))
        '04 Jan 2016'
    """
    return f"{value.day:02d} {month_abbreviation(value.month)} {value.year:04d}"


def _build_date(year: int, month: int, day: int, original_text: str) -> date:
    """Construye un objeto date con un mensaje que incluye el texto original."""
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(
            f"Fecha inválida construida de '{original_text}': "
            f"año={year}, mes={month}, día={day}: {e}"
        )
