"""
Utilidades compartidas del dominio.

Estas funciones son usadas por el parser del feed y por el ReportEngine, y
no dependen de ninguna librería externa. Solo operan sobre tipos nativos
de Python.

Uso:
    from cashflow_report.domain.shared.money import parse_decimal, format_amount
    from cashflow_report.domain.shared.month_map import month_to_int
    from cashflow_report.domain.shared.date_parser import parse_feed_date
"""
