"""
Servicio de dominio: Motor de reportes de flujo de efectivo.

Orquesta todo el proceso:
1. Recibe el feed completo (texto multi-línea) y un OutputSink.
2. Divide el feed en líneas; las vacías se ignoran.
3. Cada línea pasa por el RecordParser. Las rechazadas se descartan
   (solo se avisan a la bitácora) y el proceso sigue con la siguiente.
4. Cada Transaction se acumula en el EntityLedger (por contraparte) y en
   el DailyLedger (por fecha real de liquidación).
5. Ya con los ledgers completos, imprime los reportes por el OutputSink
   cuantas veces se le pida.

La ingesta ocurre UNA sola vez, en el constructor. Los reportes son de solo
lectura y siempre reflejan los ledgers completos.
"""

from decimal import Decimal

from cashflow_report.domain.exceptions import ConfigurationError
from cashflow_report.domain.models.cashflow_direction import CashflowDirection
from cashflow_report.domain.models.daily_summary import DailySummary
from cashflow_report.domain.models.report_snapshot import RankingEntry, ReportSnapshot
from cashflow_report.domain.ports.output_sink import OutputSink
from cashflow_report.domain.ports.process_logger import NullProcessLogger, ProcessLogger
from cashflow_report.domain.ports.record_parser import RecordParser
from cashflow_report.domain.services.daily_ledger import DailyLedger
from cashflow_report.domain.services.entity_ledger import EntityLedger
from cashflow_report.domain.shared.date_parser import format_feed_date
from cashflow_report.domain.shared.money import format_amount, format_field

DEFAULT_COLUMN_WIDTH = 20


class ReportEngine:
    """Construye los ledgers a partir del feed e imprime los reportes.

    Recibe sus dependencias por constructor. Si no se inyecta un
    RecordParser se usa el CsvRecordParser; si no se inyecta una bitácora,
    las líneas descartadas no dejan rastro.
    """

    def __init__(
        self,
        raw_input: str,
        output_sink: OutputSink,
        *,
        record_parser: RecordParser | None = None,
        logger: ProcessLogger | None = None,
        column_width: int = DEFAULT_COLUMN_WIDTH,
    ) -> None:
        """
        Args:
            raw_input: Feed completo, una operación por línea.
            output_sink: Destino de las líneas de los reportes.
            record_parser: Parser de líneas. Default: CsvRecordParser.
            logger: Bitácora de ingesta. Default: NullProcessLogger.
            column_width: Ancho de cada columna impresa.

        Raises:
            ConfigurationError: Si falta raw_input u output_sink, o si
                                column_width no es un entero positivo.
        """
        if raw_input is None:
            raise ConfigurationError("raw_input")
        if output_sink is None:
            raise ConfigurationError("output_sink")
        if isinstance(column_width, bool) or not isinstance(column_width, int):
            raise ConfigurationError("column_width", "debe ser un entero")
        if column_width < 1:
            raise ConfigurationError("column_width", f"debe ser >= 1, recibido {column_width}")

        if record_parser is None:
            # Import tardío: el dominio no depende del adaptador salvo para
            # ofrecer el parser por defecto.
            from cashflow_report.adapters.input.record_parsers.csv_record_parser import (
                CsvRecordParser,
            )

            record_parser = CsvRecordParser()

        self._sink = output_sink
        self._parser = record_parser
        self._logger = logger if logger is not None else NullProcessLogger()
        self._column_width = column_width

        self._entities = EntityLedger()
        self._daily = DailyLedger()
        self._records_ingested = 0
        self._lines_dropped = 0

        self._ingest(raw_input)

    # =================================================================
    # INGESTA
    # =================================================================

    def _ingest(self, raw_input: str) -> None:
        lines = raw_input.split("\n")
        self._logger.log_input_received(len(lines))

        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.strip()
            if not line:
                continue

            result = self._parser.parse_line(line)
            if not result.is_parsed:
                self._lines_dropped += 1
                self._logger.log_line_dropped(line_number, line, result.reason)
                continue

            transaction = result.transaction
            self._entities.add_transaction(transaction)
            self._daily.add_to_daily_summary(
                transaction.actual_settlement_date,
                transaction.direction,
                transaction.usd_value,
            )
            self._records_ingested += 1
            self._logger.log_transaction_ingested(line_number, transaction)

        self._logger.log_ingestion_complete(self._records_ingested, self._lines_dropped)

    # =================================================================
    # VISTAS
    # =================================================================

    def daily_summaries(self) -> list[DailySummary]:
        """Resúmenes diarios, del más reciente al más antiguo."""
        return [self._daily.get(day) for day in self._daily.chronological_descending()]

    def ranking(self, direction: CashflowDirection) -> list[RankingEntry]:
        """Ranking de entidades por total descendente en la dirección pedida."""
        return [
            RankingEntry(entity.name, entity.total_directed_cashflow(direction))
            for entity in self._entities.ranked_by(direction)
        ]

    def snapshot(self) -> ReportSnapshot:
        """Las tres vistas juntas, para los ReportWriter."""
        return ReportSnapshot(
            daily_summaries=tuple(self.daily_summaries()),
            incoming_ranking=tuple(self.ranking(CashflowDirection.INCOMING)),
            outgoing_ranking=tuple(self.ranking(CashflowDirection.OUTGOING)),
        )

    def total(self, direction: CashflowDirection) -> Decimal:
        """Total de todas las transacciones ingeridas en una dirección."""
        return self._entities.total(direction)

    @property
    def records_ingested(self) -> int:
        return self._records_ingested

    @property
    def lines_dropped(self) -> int:
        return self._lines_dropped

    @property
    def column_width(self) -> int:
        return self._column_width

    # =================================================================
    # IMPRESIÓN
    # =================================================================

    def print_daily_summaries(self) -> None:
        """Imprime los resúmenes diarios en orden cronológico inverso.

        Solo aparecen los días con al menos una transacción.

            Date                Incoming            Outgoing
            07 Jan 2016         14899.50            0.00
        """
        self._sink.output_line(self._row("Date", "Incoming", "Outgoing"))
        for summary in self.daily_summaries():
            self._sink.output_line(
                self._field(format_feed_date(summary.date))
                + self._amount(summary.incoming)
                + self._amount(summary.outgoing)
            )

    def print_ranking(self, direction: CashflowDirection) -> None:
        """Imprime todas las entidades ordenadas por total descendente.

        Una entidad sin flujo en esa dirección aparece con 0.00.

            Entity              Incoming
            covfefe             17608.50
        """
        self._sink.output_line(self._row("Entity", direction.label))
        for entry in self.ranking(direction):
            self._sink.output_line(self._field(entry.entity_name) + self._amount(entry.total))

    def _field(self, text: str) -> str:
        return format_field(text, self._column_width)

    def _amount(self, amount: Decimal) -> str:
        return format_amount(amount, self._column_width)

    def _row(self, *labels: str) -> str:
        return "".join(self._field(label) for label in labels)
