"""
Adaptador de salida: Sink a consola.

Escribe cada línea del reporte en un stream de texto (stdout por default).
El separador BLANK_LINE ("\\n") se imprime como una línea vacía, no como
dos saltos de línea.
"""

import sys
from typing import TextIO

from cashflow_report.domain.ports.output_sink import BLANK_LINE, OutputSink


class ConsoleSink(OutputSink):
    """Sink que imprime cada línea en la consola."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def output_line(self, text: str) -> None:
        if text == BLANK_LINE:
            text = ""
        # sys.stdout se resuelve en cada llamada para respetar redirecciones
        print(text, file=self._stream if self._stream is not None else sys.stdout)
