"""
Utilidades para montos y cantidades del feed, y para formatear columnas.

Los montos se manejan siempre como Decimal: el tipo de cambio, el precio
por unidad y los totales acumulados se suman muchas veces y float
acumularía errores de redondeo.

En el feed los campos van separados por comas, así que los números NO
traen separadores de miles ni símbolo de moneda: "0.50", "100.25", "200".
Se rechazan "1e5", "NaN", "1_000" y "$10".
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_DECIMAL_TEXT = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$", re.ASCII)
_INTEGER_TEXT = re.compile(r"^[+-]?\d+$", re.ASCII)

_CENT = Decimal("0.01")

# Rango de un entero con signo de 32 bits
UNITS_MIN = -(2**31)
UNITS_MAX = 2**31 - 1


def parse_decimal(text: str) -> Decimal:
    """Convierte un número decimal del feed a Decimal.

    Raises:
        TypeError: Si text no es str.
        ValueError: Si el texto está vacío o no es un decimal simple.

    Ejemplos:
        >>> parse_decimal("0.50")
        Decimal('0.50')
        >>> parse_decimal("150.5")
        Decimal('150.5')
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_decimal espera str, recibió {type(text).__name__}")
    cleaned = text.strip()
    if not cleaned:
        raise ValueError("El texto del número está vacío")
    if not _DECIMAL_TEXT.match(cleaned):
        raise ValueError(f"No es un número decimal: '{text}'")

    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"No se pudo convertir a número: '{text}'")


def parse_units(text: str) -> int:
    """Convierte una cantidad entera de unidades del feed a int.

    Raises:
        TypeError: Si text no es str.
        ValueError: Si el texto está vacío, no es un entero simple
                    ("200.0" no es válido) o sale del rango de 32 bits.

    Ejemplos:
        >>> parse_units("200")
        200
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_units espera str, recibió {type(text).__name__}")
    cleaned = text.strip()
    if not cleaned:
        raise ValueError("El texto de unidades está vacío")
    if not _INTEGER_TEXT.match(cleaned):
        raise ValueError(f"No es un número entero: '{text}'")

    value = int(cleaned)
    if not UNITS_MIN <= value <= UNITS_MAX:
        raise ValueError(
            f"Unidades fuera de rango: {value} (límite {UNITS_MIN}..{UNITS_MAX})"
        )
    return value


def round_amount(amount: Decimal) -> Decimal:
    """Redondea a centavos, con .5 hacia arriba (no el redondeo bancario).

    Ejemplos:
        >>> round_amount(Decimal("0.125"))
        Decimal('0.13')
    """
    return amount.quantize(_CENT, rounding=ROUND_HALF_UP)


def format_field(text: str, width: int) -> str:
    """Alinea un texto a la izquierda y lo rellena con espacios hasta width.

    Un texto más largo que width no se corta.
    """
    return f"{text:<{width}}"


def format_amount(amount: Decimal, width: int) -> str:
    """Formatea un monto con exactamente 2 decimales, alineado a la izquierda.

    Ejemplos:
        >>> format_amount(Decimal("10025"), 10)
        '10025.00  '
        >>> format_amount(Decimal("0"), 6)
        '0.00  '
    """
    return format_field(f"{round_amount(amount):.2f}", width)
