"""
Utilidades del sistema
"""

from .date_utils import parse_date, format_date

__all__ = [
    'parse_date',
    'format_date',
]
