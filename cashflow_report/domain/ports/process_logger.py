"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define los EVENTOS de negocio que ocurren mientras el ReportEngine ingiere
el feed. El engine descarta en silencio las líneas mal formadas (no
aparecen en ningún reporte), pero sí avisa a la bitácora para que quien lo
necesite pueda contarlas o mostrarlas.

Implementaciones:
- NullProcessLogger (aquí mismo): no hace nada. Es el default del engine.
- ConsoleLogger (adaptador): imprime eventos y un resumen final.
"""

from abc import ABC, abstractmethod

from cashflow_report.domain.models.transaction import Transaction


class ProcessLogger(ABC):
    """Interfaz para la bitácora de ingesta del feed."""

    @abstractmethod
    def log_input_received(self, num_lines: int) -> None:
        """Registra que se recibió el feed y cuántas líneas tiene."""
        ...

    @abstractmethod
    def log_transaction_ingested(self, line_number: int, transaction: Transaction) -> None:
        """Registra que una línea se convirtió en transacción y se acumuló.

        Args:
            line_number: Número de línea en el feed, empezando en 1.
            transaction: La transacción acumulada.
        """
        ...

    @abstractmethod
    def log_line_dropped(self, line_number: int, line: str, reason: str) -> None:
        """Registra que una línea se descartó por no ser parseable.

        Args:
            line_number: Número de línea en el feed, empezando en 1.
            line: Texto de la línea descartada.
            reason: Motivo del rechazo que dio el RecordParser.
        """
        ...

    @abstractmethod
    def log_ingestion_complete(self, num_records: int, num_dropped: int) -> None:
        """Registra el fin de la ingesta."""
        ...

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de la ingesta.

        Returns:
            Diccionario con métricas:
            {
                'lineas_recibidas': int,
                'transacciones': int,
                'lineas_descartadas': int,
                'descartes': List[dict],  # [{linea, texto, motivo}]
            }
        """
        ...


class NullProcessLogger(ProcessLogger):
    """Bitácora que no registra nada."""

    def log_input_received(self, num_lines: int) -> None:
        pass

    def log_transaction_ingested(self, line_number: int, transaction: Transaction) -> None:
        pass

    def log_line_dropped(self, line_number: int, line: str, reason: str) -> None:
        pass

    def log_ingestion_complete(self, num_records: int, num_dropped: int) -> None:
        pass

    def get_summary(self) -> dict:
        return {
            "lineas_recibidas": 0,
            "transacciones": 0,
            "lineas_descartadas": 0,
            "descartes": [],
        }
