"""
Excepciones de dominio del proyecto cashflow-report.

Jerarquía:
    ReportBaseError
    ├── ConfigurationError    → Falta un argumento obligatorio o es inválido
    ├── LineParseError        → Una línea del feed no se pudo parsear
    └── OutputError           → Error al generar un archivo de salida

LineParseError nunca sale del parser: el CsvRecordParser la convierte en un
LineParseResult rechazado y el ReportEngine descarta la línea.
"""


class ReportBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta."""


class ConfigurationError(ReportBaseError):
    """Se lanza cuando un componente se construye sin un argumento
    obligatorio o con un valor fuera de rango.

    Ejemplos:
    - ReportEngine(None, sink)
    - ReportEngine(texto, None)
    - ReportEngine(texto, sink, column_width=0)
    """

    def __init__(self, argumento: str, detalle: str = ""):
        self.argumento = argumento
        self.detalle = detalle
        mensaje = f"Argumento inválido: '{argumento}'"
        if detalle:
            mensaje += f" ({detalle})"
        super().__init__(mensaje)


class LineParseError(ReportBaseError):
    """Se lanza dentro del parser cuando una línea no tiene el formato esperado.

    Esto puede pasar porque:
    - La línea no tiene exactamente 8 campos.
    - El marcador de dirección no es "S" ni "B".
    - Un número o una fecha no se pueden convertir.
    """

    def __init__(self, linea: str, causa: str):
        self.linea = linea
        self.causa = causa
        super().__init__(f"Línea no parseable '{linea}': {causa}")


class OutputError(ReportBaseError):
    """Se lanza cuando falla la generación de un archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - Hay un error en el formato del Excel.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
