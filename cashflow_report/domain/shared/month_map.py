"""
Mapeo de nombres de meses en inglés a números, y de regreso.

El feed usa fechas "dd MMM yyyy" con abreviaturas en inglés ("01 Jan 2016")
y los reportes imprimen las fechas con ese mismo formato. strftime("%b")
depende del locale del sistema, así que la conversión se hace aquí con un
diccionario fijo.

Las abreviaturas se comparan tal cual: "Jan" es válido, "jan" y "JAN" no.
"""

_ABBREVIATIONS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# Abreviatura → número de mes 1-12
_MONTH_MAP: dict[str, int] = {
    abbr: number for number, abbr in enumerate(_ABBREVIATIONS, start=1)
}


def month_to_int(month_name: str) -> int:
    """Convierte una abreviatura de mes en inglés a su número 1-12.

    Raises:
        ValueError: Si la abreviatura no se reconoce.

    Ejemplos:
        >>> month_to_int("Jan")
        1
        >>> month_to_int("Dec")
        12
    """
    result = _MONTH_MAP.get(month_name.strip())
    if result is None:
        raise ValueError(
            f"Mes no reconocido: '{month_name}'. "
            f"Valores válidos: {', '.join(_ABBREVIATIONS)}"
        )
    return result


def month_abbreviation(month: int) -> str:
    """Devuelve la abreviatura en inglés de un mes 1-12.

    Ejemplos:
        >>> month_abbreviation(1)
        'Jan'
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Mes fuera de rango: {month}. Debe ser 1-12.")
    return _ABBREVIATIONS[month - 1]
