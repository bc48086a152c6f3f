"""
Puerto de entrada: Parser de líneas del feed de operaciones.

Convierte UNA línea cruda en una Transaction o en un rechazo. Hoy el único
formato es CSV de 8 campos (CsvRecordParser), pero el ReportEngine solo
conoce esta interfaz.
"""

from abc import ABC, abstractmethod

from cashflow_report.domain.models.line_parse_result import LineParseResult


class RecordParser(ABC):
    """Interfaz para parsear una línea del feed."""

    @abstractmethod
    def parse_line(self, raw_line: str) -> LineParseResult:
        """Parsea una línea.

        Args:
            raw_line: Línea del feed, sin salto de línea final.

        Returns:
            LineParseResult.parsed(transaction) si la línea es válida.
            LineParseResult.rejected(motivo) si no lo es. Una línea mal
            formada NUNCA lanza excepción: es un caso esperado.

        Raises:
            TypeError: Si raw_line es None. Eso sí es un error del
                       programa que llama, no del feed.
        """
        ...
