"""
Utilidades de fechas

El formato canónico es ISO (YYYY-MM-DD). El formato DD.MM.YYYY que usaban
versiones anteriores del formulario y del CSV solo se acepta al leer.
"""

from datetime import date, datetime
from typing import Optional, Union

FORMATO_ISO = "%Y-%m-%d"
FORMATO_LEGADO = "%d.%m.%Y"


def parse_date(value: Union[str, date, None]) -> Optional[date]:
    """
    Convierte un valor de entrada a date.

    Returns:
        date, o None si el valor está vacío

    Raises:
        ValueError: si el texto no está en ninguno de los formatos aceptados
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    texto = str(value).strip()
    if not texto:
        return None

    for formato in (FORMATO_ISO, FORMATO_LEGADO):
        try:
            return datetime.strptime(texto, formato).date()
        except ValueError:
            continue

    raise ValueError(f"fecha inválida '{texto}' (use YYYY-MM-DD)")


def format_date(value: Optional[date]) -> str:
    """date -> 'YYYY-MM-DD', vacío si no hay fecha"""
    return value.strftime(FORMATO_ISO) if value else ""
