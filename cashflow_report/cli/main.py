"""
Punto de entrada CLI: cashflow-report.

Uso:
    # Reporte del feed de ejemplo incluido
    cashflow-report

    # Reporte de un archivo CSV
    cashflow-report /ruta/operaciones.csv

    # Columnas de 25 caracteres, exportando también a Excel
    cashflow-report /ruta/operaciones.csv -w 25 -o /ruta/reporte.xlsx

    # Mostrar en stderr las líneas descartadas y el resumen de ingesta
    cashflow-report /ruta/operaciones.csv -v

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (ConsoleSink, ConsoleLogger, ExcelReportWriter).
- Las inyecta en el ReportEngine.
- Imprime los tres bloques del reporte.

No contiene lógica de negocio, solo "fontanería" (wiring).
"""

import argparse
import sys
from pathlib import Path

from cashflow_report.adapters.input.record_parsers.csv_record_parser import CsvRecordParser
from cashflow_report.adapters.output.loggers.console_logger import ConsoleLogger
from cashflow_report.adapters.output.sinks.console_sink import ConsoleSink
from cashflow_report.adapters.output.writers.excel_writer import ExcelReportWriter
from cashflow_report.cli.sample_data import SAMPLE_FEED
from cashflow_report.domain.exceptions import OutputError
from cashflow_report.domain.models.cashflow_direction import CashflowDirection
from cashflow_report.domain.ports.output_sink import BLANK_LINE, OutputSink
from cashflow_report.domain.ports.process_logger import NullProcessLogger
from cashflow_report.domain.services.report_engine import DEFAULT_COLUMN_WIDTH, ReportEngine

BANNER_DAILY = "------------- Print Daily Summaries -------------"
BANNER_INCOMING = "------------- Print Incoming Ranking ------------"
BANNER_OUTGOING = "------------- Print Outgoing Ranking ------------"
BANNER_FOOTER = "-------------------------------------------------"


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    if args.input_path:
        input_path = Path(args.input_path)
        if not input_path.is_file():
            print(f"❌ La ruta no existe: {input_path}", file=sys.stderr)
            sys.exit(1)
        raw_input = input_path.read_text(encoding="utf-8")
    else:
        raw_input = SAMPLE_FEED

    # --- Ensamblar componentes ---
    sink = ConsoleSink()
    logger = ConsoleLogger() if args.verbose else NullProcessLogger()

    engine = ReportEngine(
        raw_input,
        sink,
        record_parser=CsvRecordParser(),
        logger=logger,
        column_width=args.column_width,
    )

    # --- Imprimir ---
    print_full_report(engine, sink)

    # --- Exportar ---
    if args.excel_path:
        try:
            output_file = ExcelReportWriter().write(engine.snapshot(), Path(args.excel_path))
        except OutputError as e:
            print(f"❌ {e}", file=sys.stderr)
            sys.exit(1)
        print(f"📁 Excel generado: {output_file}", file=sys.stderr)

    if isinstance(logger, ConsoleLogger):
        logger.print_summary()


def print_full_report(engine: ReportEngine, sink: OutputSink) -> None:
    """Imprime los tres bloques del reporte, cada uno entre banners.

    Orden: resúmenes diarios, ranking entrante, ranking saliente. Después
    de cada bloque va una línea en blanco.
    """
    sink.output_line(BANNER_DAILY)
    engine.print_daily_summaries()
    sink.output_line(BANNER_FOOTER)
    sink.output_line(BLANK_LINE)

    sink.output_line(BANNER_INCOMING)
    engine.print_ranking(CashflowDirection.INCOMING)
    sink.output_line(BANNER_FOOTER)
    sink.output_line(BLANK_LINE)

    sink.output_line(BANNER_OUTGOING)
    engine.print_ranking(CashflowDirection.OUTGOING)
    sink.output_line(BANNER_FOOTER)
    sink.output_line(BLANK_LINE)


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"no es un entero: '{text}'")
    if value < 1:
        raise argparse.ArgumentTypeError(f"debe ser >= 1, recibido {value}")
    return value


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="cashflow-report",
        description="Reporte de flujo de efectivo diario y ranking de entidades",
        epilog="Ejemplo: cashflow-report operaciones.csv -o reporte.xlsx",
    )

    parser.add_argument(
        "input_path",
        nargs="?",
        help="Archivo CSV con una operación por línea. "
        "Si no se especifica, se usa el feed de ejemplo.",
    )

    parser.add_argument(
        "-w",
        "--column-width",
        dest="column_width",
        type=_positive_int,
        default=DEFAULT_COLUMN_WIDTH,
        help=f"Ancho de cada columna del reporte (default: {DEFAULT_COLUMN_WIDTH}).",
    )

    parser.add_argument(
        "-o",
        "--excel",
        dest="excel_path",
        help="Exportar además el reporte a este archivo Excel (.xlsx).",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Mostrar en stderr la bitácora de ingesta.",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
