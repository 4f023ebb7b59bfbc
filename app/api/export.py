"""
VISA STATS - Exportación XLSX
app/api/export.py
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session
from io import BytesIO
from pathlib import Path
from urllib.parse import quote
import logging

from app.config import Settings, get_settings
from app.core.exceptions import ExportError
from app.database import get_db
from app.services.record_store import RecordStore
from app.services.spreadsheet import XLSX_MEDIA_TYPE, build_workbook, export_filename

logger = logging.getLogger(__name__)

router = APIRouter()


def content_disposition(filename: str) -> str:
    """Nombre ASCII para clientes antiguos y filename* para el resto"""
    ascii_name = filename.encode("ascii", "ignore").decode("ascii") or "visa_statistics.xlsx"
    return f'attachment; filename="{ascii_name}"; filename*=UTF-8\'\'{quote(filename)}'


@router.get("/export")
async def exportar_excel(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Descarga todos los registros en Excel.

    Con SNAPSHOT_ON_SUBMIT activo se entrega el archivo que se regenera en
    cada envío; si todavía no existe, 404. Si no, se genera al momento.
    """
    if settings.snapshot_on_submit:
        snapshot = Path(settings.snapshot_path)
        if not snapshot.exists():
            raise HTTPException(status_code=404, detail="Todavía no hay estadísticas exportadas")
        try:
            output = BytesIO(snapshot.read_bytes())
        except OSError as e:
            raise ExportError(f"No se pudo leer {snapshot}: {e}") from e
    else:
        output = build_workbook(RecordStore(db).list_all())

    filename = export_filename(settings.country, settings.today())
    logger.info(f"📥 Exportando {filename}")

    return StreamingResponse(
        output,
        media_type=XLSX_MEDIA_TYPE,
        headers={'Content-Disposition': content_disposition(filename)}
    )
