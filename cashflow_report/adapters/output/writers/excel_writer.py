"""
Adaptador de salida: Escritor de Excel.

Exporta las vistas del reporte a un archivo Excel de 3 hojas:
- Hoja "Daily Summary": fecha, entrante, saliente, neto.
- Hoja "Incoming Ranking": entidad y total entrante.
- Hoja "Outgoing Ranking": entidad y total saliente.

Las filas llegan ya ordenadas en el ReportSnapshot; aquí solo se
convierten a DataFrame y se les da formato con xlsxwriter.
"""

from pathlib import Path

import pandas as pd

from cashflow_report.domain.exceptions import OutputError
from cashflow_report.domain.models.report_snapshot import RankingEntry, ReportSnapshot
from cashflow_report.domain.ports.report_writer import ReportWriter
from cashflow_report.domain.shared.date_parser import format_feed_date
from cashflow_report.domain.shared.money import round_amount

SHEET_DAILY = "Daily Summary"
SHEET_INCOMING = "Incoming Ranking"
SHEET_OUTGOING = "Outgoing Ranking"


class ExcelReportWriter(ReportWriter):
    """Genera el reporte en Excel con formato estandarizado."""

    def write(self, snapshot: ReportSnapshot, output_path: Path) -> Path:
        """Escribe el snapshot a Excel.

        Args:
            snapshot: Vistas del reporte.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        output_path = Path(output_path)
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self._escribir_excel(snapshot, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    def build_frames(self, snapshot: ReportSnapshot) -> dict[str, pd.DataFrame]:
        """Convierte cada vista del snapshot en un DataFrame, por nombre de hoja."""
        df_daily = pd.DataFrame(
            [
                {
                    "Date": format_feed_date(s.date),
                    "Incoming": float(round_amount(s.incoming)),
                    "Outgoing": float(round_amount(s.outgoing)),
                    "Net": float(round_amount(s.net)),
                }
                for s in snapshot.daily_summaries
            ],
            columns=["Date", "Incoming", "Outgoing", "Net"],
        )

        return {
            SHEET_DAILY: df_daily,
            SHEET_INCOMING: self._ranking_frame(snapshot.incoming_ranking, "Incoming"),
            SHEET_OUTGOING: self._ranking_frame(snapshot.outgoing_ranking, "Outgoing"),
        }

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    @staticmethod
    def _ranking_frame(entries: tuple[RankingEntry, ...], label: str) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {"Entity": e.entity_name, label: float(round_amount(e.total))}
                for e in entries
            ],
            columns=["Entity", label],
        )

    def _escribir_excel(self, snapshot: ReportSnapshot, output_path: Path) -> None:
        frames = self.build_frames(snapshot)

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            for sheet_name, df in frames.items():
                df.to_excel(writer, index=False, sheet_name=sheet_name)

            workbook = writer.book

            # Formato para montos (2 decimales con separador de miles)
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            ws_daily = writer.sheets[SHEET_DAILY]
            ws_daily.set_column("A:A", 14)  # Date
            ws_daily.set_column("B:D", 18, money_format)  # Incoming/Outgoing/Net

            for sheet_name in (SHEET_INCOMING, SHEET_OUTGOING):
                ws = writer.sheets[sheet_name]
                ws.set_column("A:A", 30)  # Entity
                ws.set_column("B:B", 18, money_format)  # Total
