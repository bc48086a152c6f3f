"""
Servicio de dominio: Calendario de liquidación.

Una operación no puede liquidarse en fin de semana. Qué días son fin de
semana depende de la moneda:

- AED, SAR: la semana laboral va de domingo a jueves, así que el fin de
  semana es viernes + sábado.
- Todas las demás monedas (incluidas las desconocidas): sábado + domingo.

La moneda se resuelve UNA vez a una convención (WeekendConvention) y luego
una sola tabla de desplazamientos, indexada por convención, da cuántos días
hay que avanzar. Ambos fines de semana son de 2 días, así que un solo salto
siempre cae en día hábil y la fecha resultante no se vuelve a revisar.
"""

from datetime import date, timedelta
from enum import Enum

FRIDAY_SATURDAY_CURRENCIES: frozenset[str] = frozenset({"AED", "SAR"})


class WeekendConvention(Enum):
    """Convenciones de fin de semana soportadas."""

    FRIDAY_SATURDAY = "fri-sat"
    SATURDAY_SUNDAY = "sat-sun"


# date.weekday(): lunes=0 ... viernes=4, sábado=5, domingo=6
_FRIDAY, _SATURDAY, _SUNDAY = 4, 5, 6

_SHIFT_DAYS: dict[WeekendConvention, dict[int, int]] = {
    WeekendConvention.FRIDAY_SATURDAY: {_FRIDAY: 2, _SATURDAY: 1},
    WeekendConvention.SATURDAY_SUNDAY: {_SATURDAY: 2, _SUNDAY: 1},
}


def weekend_convention_for(currency: str) -> WeekendConvention:
    """Devuelve la convención de fin de semana de una moneda.

    El código de moneda se compara sin importar mayúsculas ni espacios
    alrededor. Una moneda desconocida usa sábado/domingo.

    Raises:
        ValueError: Si currency es None.

    Ejemplos:
        >>> weekend_convention_for("aed")
        <WeekendConvention.FRIDAY_SATURDAY: 'fri-sat'>
        >>> weekend_convention_for("SGP")
        <WeekendConvention.SATURDAY_SUNDAY: 'sat-sun'>
    """
    if currency is None:
        raise ValueError("currency no puede ser None")
    if currency.strip().upper() in FRIDAY_SATURDAY_CURRENCIES:
        return WeekendConvention.FRIDAY_SATURDAY
    return WeekendConvention.SATURDAY_SUNDAY


def shift_past_weekend(desired_date: date, convention: WeekendConvention) -> date:
    """Avanza la fecha al primer día hábil según la convención.

    Si la fecha ya es hábil se devuelve sin cambios.

    Raises:
        ValueError: Si el día hábil cae después de date.max.
    """
    days = _SHIFT_DAYS[convention].get(desired_date.weekday(), 0)
    try:
        return desired_date + timedelta(days=days)
    except OverflowError:
        raise ValueError(
            f"Fecha de liquidación fuera de rango: {desired_date.isoformat()} + {days} días"
        )


def compute_actual_settlement_date(desired_date: date, currency: str) -> date:
    """Calcula la fecha real de liquidación de una operación.

    Args:
        desired_date: Fecha en la que se desea liquidar.
        currency: Código de la moneda de la operación (ej: "AED", "SGP").

    Returns:
        La fecha deseada, o el siguiente día hábil si cae en fin de semana.

    Ejemplos:
        >>> compute_actual_settlement_date(date(2016, 1, 2), "SGP")  # sábado
        datetime.date(2016, 1, 4)
        >>> compute_actual_settlement_date(date(2016, 1, 1), "AED")  # viernes
        datetime.date(2016, 1, 3)
    """
    return shift_past_weekend(desired_date, weekend_convention_for(currency))
