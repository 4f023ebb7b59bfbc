"""
Jerarquía de excepciones de VISA STATS
Errores de dominio que la API y los scripts traducen para el usuario
"""


class VisaStatsException(Exception):
    """Base para todos los errores de la aplicación"""
    pass


class ValidationError(VisaStatsException):
    """Un campo de entrada no se pudo interpretar"""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class StorageError(VisaStatsException):
    """Falló una lectura o escritura en la base de datos"""
    pass


class ParseError(VisaStatsException):
    """El archivo de carga masiva está mal formado"""

    def __init__(self, line: int, message: str):
        self.line = line
        self.message = message
        super().__init__(f"Línea {line}: {message}")


class ExportError(VisaStatsException):
    """No se pudo generar o escribir la hoja de cálculo"""
    pass
