"""
Puerto de salida: Escritor de reportes a archivo.

El reporte principal sale línea por línea por un OutputSink. Este puerto
es para exportar las mismas vistas (ReportSnapshot) a un formato
persistente. Hoy es Excel; el dominio no conoce el formato.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from cashflow_report.domain.models.report_snapshot import ReportSnapshot


class ReportWriter(ABC):
    """Interfaz para escribir un ReportSnapshot a archivo."""

    @abstractmethod
    def write(self, snapshot: ReportSnapshot, output_path: Path) -> Path:
        """Escribe las vistas del reporte.

        Args:
            snapshot: Vistas materializadas por el ReportEngine.
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...
