"""
Puerto de salida: Destino de las líneas del reporte.

El ReportEngine no sabe si sus líneas terminan en la consola, en una lista
en memoria (tests) o en un archivo. Solo conoce esta interfaz de un método.
"""

from abc import ABC, abstractmethod

BLANK_LINE = "\n"
"""Texto que el engine emite para pedir una línea separadora en blanco."""


class OutputSink(ABC):
    """Interfaz para recibir el reporte línea por línea."""

    @abstractmethod
    def output_line(self, text: str) -> None:
        """Recibe una línea ya formateada, sin salto de línea final.

        Si text es exactamente BLANK_LINE ("\\n"), la línea es un separador
        en blanco. Cada implementación decide cómo representarlo (o si lo
        suprime).
        """
        ...
