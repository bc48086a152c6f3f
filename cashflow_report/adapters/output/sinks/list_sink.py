"""
Adaptador de salida: Sink en memoria.

Guarda las líneas tal cual llegan, incluido BLANK_LINE. Sirve para usar el
ReportEngine como librería (obtener el reporte como lista de strings) y
para los tests.
"""

from cashflow_report.domain.ports.output_sink import OutputSink


class ListSink(OutputSink):
    """Sink que acumula las líneas en una lista."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def output_line(self, text: str) -> None:
        self.lines.append(text)

    def clear(self) -> None:
        self.lines.clear()

    def __len__(self) -> int:
        return len(self.lines)
