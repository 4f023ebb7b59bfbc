"""
VISA STATS - Exportación a Excel
app/services/spreadsheet.py

Convierte el conjunto de registros en un XLSX de una hoja.
"""

from io import BytesIO
from pathlib import Path
from datetime import date
from typing import Iterable, Optional
import enum
import logging

import pandas as pd

from app.core.exceptions import ExportError
from app.models import RECORD_FIELDS

logger = logging.getLogger(__name__)

SHEET_NAME = "Visa Stats"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
EXPORT_COLUMNS = ["id"] + RECORD_FIELDS


def _fila(registro) -> dict:
    fila = {}
    for columna in EXPORT_COLUMNS:
        valor = getattr(registro, columna, None)
        if isinstance(valor, enum.Enum):
            valor = valor.value
        fila[columna] = valor
    return fila


def records_to_dataframe(records: Iterable) -> pd.DataFrame:
    """Un DataFrame con las columnas en el orden canónico, aunque no haya filas"""
    return pd.DataFrame([_fila(r) for r in records], columns=EXPORT_COLUMNS)


def build_workbook(records: Iterable) -> BytesIO:
    """
    Genera el XLSX en memoria.

    Raises:
        ExportError: si pandas/openpyxl no pueden escribir el libro
    """
    df = records_to_dataframe(records)

    output = BytesIO()
    try:
        with pd.ExcelWriter(output, engine='openpyxl') as writer:
            df.to_excel(writer, index=False, sheet_name=SHEET_NAME)
    except Exception as e:
        logger.error(f"❌ Error generando XLSX: {e}")
        raise ExportError(f"Error generando XLSX: {e}") from e

    output.seek(0)
    return output


def write_snapshot(records: Iterable, path: str) -> Path:
    """Escribe el XLSX completo en disco (snapshot)"""
    destino = Path(path)
    contenido = build_workbook(records)
    try:
        destino.parent.mkdir(parents=True, exist_ok=True)
        destino.write_bytes(contenido.getvalue())
    except OSError as e:
        logger.error(f"❌ No se pudo escribir el snapshot {destino}: {e}")
        raise ExportError(f"No se pudo escribir {destino}: {e}") from e

    logger.info(f"📁 Snapshot XLSX actualizado: {destino}")
    return destino


def export_filename(country: Optional[str], today: date) -> str:
    """visa_statistics[_<país>]_<YYYY-MM-DD>.xlsx"""
    partes = ["visa_statistics"]
    if country:
        partes.append(country.strip().replace(" ", "_"))
    partes.append(today.isoformat())
    return "_".join(partes) + ".xlsx"
