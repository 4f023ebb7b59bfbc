"""
VISA STATS - Carga masiva y respaldo CSV
app/services/transfer.py

Formato: texto separado por ';', una fila de encabezados, fechas
YYYY-MM-DD (se acepta DD.MM.YYYY al leer), booleanos true/false y
campos vacíos para valores nulos.

La carga masiva reemplaza la tabla completa, y solo después de haber
leído el archivo entero sin errores.
"""

from sqlalchemy.orm import Session
from pathlib import Path
from typing import Dict, Iterable, List, TextIO
import csv
import enum
import io
import logging

from app.core.exceptions import ParseError
from app.models import (
    RECORD_FIELDS,
    DATE_FIELDS,
    BOOLEAN_FIELDS,
    INTEGER_FIELDS,
    FLOAT_FIELDS,
    VisaStatus,
)
from app.services.record_store import RecordStore
from app.utils.date_utils import parse_date, format_date

logger = logging.getLogger(__name__)

DELIMITER = ";"

# Encabezados de respaldos antiguos
HEADER_ALIASES = {
    "planned_stay_in_italy": "planned_stay_in_country",
}


# ============================================================================
# LECTURA
# ============================================================================

def _convertir(campo: str, texto: str, linea: int):
    valor = texto.strip()

    if campo in BOOLEAN_FIELDS:
        return valor.lower() == "true"

    if campo in DATE_FIELDS:
        try:
            return parse_date(valor)
        except ValueError as e:
            raise ParseError(linea, f"{campo}: {e}") from e

    if campo in INTEGER_FIELDS:
        if not valor:
            return None
        try:
            return int(valor)
        except ValueError as e:
            raise ParseError(linea, f"{campo}: '{valor}' no es un entero") from e

    if campo in FLOAT_FIELDS:
        if not valor:
            return None
        try:
            return float(valor.replace(",", "."))
        except ValueError as e:
            raise ParseError(linea, f"{campo}: '{valor}' no es un número") from e

    if campo == "visa_status":
        if not valor:
            return None
        try:
            return VisaStatus(valor)
        except ValueError as e:
            raise ParseError(linea, f"visa_status: '{valor}' debe ser 1 o 0") from e

    return texto


def parse_csv(text: str) -> List[Dict]:
    """
    Interpreta el contenido completo de un CSV.

    La primera columna siempre es city, diga lo que diga su encabezado.
    Las columnas desconocidas (por ejemplo id) se ignoran.

    Raises:
        ParseError: con el número de línea del primer valor inválido
    """
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff")), delimiter=DELIMITER)

    try:
        encabezados = next(reader)
    except StopIteration:
        raise ParseError(1, "el archivo está vacío")
    except csv.Error as e:
        raise ParseError(1, str(e)) from e

    columnas = ["city"]
    for nombre in encabezados[1:]:
        nombre = nombre.strip()
        columnas.append(HEADER_ALIASES.get(nombre, nombre))

    registros = []
    try:
        for fila in reader:
            if not any(celda.strip() for celda in fila):
                continue

            linea = reader.line_num
            if len(fila) > len(columnas):
                raise ParseError(linea, f"{len(fila)} columnas, se esperaban {len(columnas)}")

            celdas = dict(zip(columnas, fila))
            registros.append({
                campo: _convertir(campo, celdas.get(campo, ""), linea)
                for campo in RECORD_FIELDS
            })
    except csv.Error as e:
        raise ParseError(reader.line_num, str(e)) from e

    return registros


def read_csv_file(path: str) -> List[Dict]:
    try:
        contenido = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(0, f"no se pudo leer {path}: {e}") from e
    return parse_csv(contenido)


def import_csv(db: Session, path: str) -> int:
    """
    Reemplaza la tabla con el contenido del CSV.

    Returns:
        Cantidad de registros cargados
    """
    registros = read_csv_file(path)
    logger.info(f"📄 CSV procesado: {len(registros)} registros en {path}")

    store = RecordStore(db)
    store.create_table()
    return store.replace_all(registros)


# ============================================================================
# ESCRITURA
# ============================================================================

def _formatear(valor) -> str:
    if valor is None:
        return ""
    if isinstance(valor, bool):
        return "true" if valor else "false"
    if isinstance(valor, enum.Enum):
        return valor.value
    if hasattr(valor, "isoformat"):
        return format_date(valor)
    return str(valor)


def write_csv(records: Iterable, stream: TextIO) -> int:
    """Escribe encabezados y una fila por registro; devuelve cuántas filas"""
    writer = csv.writer(stream, delimiter=DELIMITER, lineterminator="\n")
    writer.writerow(RECORD_FIELDS)

    total = 0
    for registro in records:
        writer.writerow([_formatear(getattr(registro, campo, None)) for campo in RECORD_FIELDS])
        total += 1
    return total


def backup_csv(db: Session, path: str) -> int:
    """Vuelca toda la tabla al archivo CSV indicado"""
    registros = RecordStore(db).list_all()

    destino = Path(path)
    destino.parent.mkdir(parents=True, exist_ok=True)
    with destino.open("w", encoding="utf-8", newline="") as f:
        total = write_csv(registros, f)

    logger.info(f"✅ Respaldo escrito: {total} registros en {destino}")
    return total
