"""
Modelo de dominio: Dirección del flujo de efectivo.

La dirección es relativa al dueño del reporte:
- Una venta ("S") significa que recibimos efectivo → INCOMING.
- Una compra ("B") significa que pagamos efectivo → OUTGOING.
"""

from enum import Enum


class CashflowDirection(Enum):
    """Dirección de un flujo de efectivo.

    El valor de cada miembro es la etiqueta que se imprime en el
    encabezado de los rankings.
    """

    INCOMING = "Incoming"
    OUTGOING = "Outgoing"

    @classmethod
    def from_marker(cls, marker: str) -> "CashflowDirection | None":
        """Convierte el marcador de operación del feed a una dirección.

        La comparación es exacta (sensible a mayúsculas): "s" no es "S".

        Returns:
            La dirección, o None si el marcador no es "S" ni "B".

        Ejemplos:
            >>> CashflowDirection.from_marker("S")
            <CashflowDirection.INCOMING: 'Incoming'>
            >>> CashflowDirection.from_marker("YY") is None
            True
        """
        return _MARKERS.get(marker)

    @property
    def label(self) -> str:
        return self.value


_MARKERS: dict[str, CashflowDirection] = {
    "S": CashflowDirection.INCOMING,
    "B": CashflowDirection.OUTGOING,
}
