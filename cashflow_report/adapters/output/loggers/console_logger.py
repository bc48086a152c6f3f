"""
Adaptador de salida: Logger a consola.

Implementación de ProcessLogger que imprime los eventos de la ingesta y
lleva la cuenta de líneas recibidas, transacciones y descartes. Cada
evento se imprime; el CLI solo lo instala con --verbose.

Imprime en stderr por default para no mezclarse con el reporte, que sale
por stdout a través del ConsoleSink.
"""

import sys
from typing import TextIO

from cashflow_report.domain.models.transaction import Transaction
from cashflow_report.domain.ports.process_logger import ProcessLogger
from cashflow_report.domain.shared.date_parser import format_feed_date
from cashflow_report.domain.shared.money import round_amount


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de ingesta a consola."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """
        Args:
            stream: Destino de los mensajes. Default: sys.stderr.
        """
        self._stream = stream
        self._lineas_recibidas: int = 0
        self._transacciones: int = 0
        self._descartes: list[dict] = []

    def log_input_received(self, num_lines: int) -> None:
        self._lineas_recibidas += num_lines
        self._print(f"  📄 Feed recibido: {num_lines} líneas")

    def log_transaction_ingested(self, line_number: int, transaction: Transaction) -> None:
        self._transacciones += 1
        self._print(
            f"  ✅ Línea {line_number}: {transaction.entity_name} "
            f"{transaction.direction.label} {round_amount(transaction.usd_value)} USD "
            f"→ {format_feed_date(transaction.actual_settlement_date)}"
        )

    def log_line_dropped(self, line_number: int, line: str, reason: str) -> None:
        self._descartes.append({"linea": line_number, "texto": line, "motivo": reason})
        self._print(f"  ⏭️  Descartada línea {line_number}: {reason}")

    def log_ingestion_complete(self, num_records: int, num_dropped: int) -> None:
        self._print(
            f"  📊 Ingesta completa: {num_records} transacciones, "
            f"{num_dropped} líneas descartadas"
        )

    def get_summary(self) -> dict:
        return {
            "lineas_recibidas": self._lineas_recibidas,
            "transacciones": self._transacciones,
            "lineas_descartadas": len(self._descartes),
            "descartes": self._descartes,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final de la ingesta."""
        self._print("\n" + "=" * 60)
        self._print("RESUMEN DE INGESTA")
        self._print("=" * 60)
        self._print(f"  Líneas recibidas:     {self._lineas_recibidas}")
        self._print(f"  Transacciones:        {self._transacciones}")
        self._print(f"  Líneas descartadas:   {len(self._descartes)}")

        if self._descartes:
            self._print("\n  DESCARTES:")
            for d in self._descartes:
                self._print(f"    - línea {d['linea']}: {d['motivo']}")

        self._print("=" * 60)

    def _print(self, message: str) -> None:
        print(message, file=self._stream if self._stream is not None else sys.stderr)
