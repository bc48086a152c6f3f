"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from cashflow_report.domain.ports import OutputSink, RecordParser
"""

from cashflow_report.domain.ports.output_sink import BLANK_LINE, OutputSink
from cashflow_report.domain.ports.process_logger import NullProcessLogger, ProcessLogger
from cashflow_report.domain.ports.record_parser import RecordParser
from cashflow_report.domain.ports.report_writer import ReportWriter

__all__ = [
    "BLANK_LINE",
    "NullProcessLogger",
    "OutputSink",
    "ProcessLogger",
    "RecordParser",
    "ReportWriter",
]
