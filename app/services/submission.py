"""
VISA STATS - Servicio de Envío
app/services/submission.py

Lógica de negocio para:
- Interpretar las fechas del formulario
- Calcular los días de espera
- Guardar el registro
- Regenerar el snapshot XLSX si está activado
"""

from sqlalchemy.orm import Session
from datetime import date
from typing import Optional
import math
import logging

from app.config import Settings, get_settings
from app.core.exceptions import ValidationError
from app.models import VisaStat, DATE_FIELDS
from app.schemas.visa_stat import VisaStatCreate
from app.services.record_store import RecordStore
from app.services.spreadsheet import write_snapshot
from app.utils.date_utils import parse_date

logger = logging.getLogger(__name__)

SEGUNDOS_POR_DIA = 24 * 60 * 60


def compute_waiting_days(application_date: date, issue_date: Optional[date]) -> Optional[int]:
    """
    Días entre solicitud y emisión, redondeado hacia arriba.

    No se valida el signo: una emisión anterior a la solicitud da un
    número negativo y se guarda tal cual.
    """
    if application_date is None or issue_date is None:
        return None
    diferencia = issue_date - application_date
    return math.ceil(diferencia.total_seconds() / SEGUNDOS_POR_DIA)


class SubmissionService:
    """Servicio para registrar experiencias nuevas"""

    def __init__(self, db: Session, settings: Optional[Settings] = None):
        self.db = db
        self.settings = settings or get_settings()
        self.store = RecordStore(db)

    def submit(self, payload: VisaStatCreate) -> VisaStat:
        """
        Guarda un registro nuevo con waiting_days calculado.

        Args:
            payload: campos del formulario (sin id ni waiting_days)

        Returns:
            El registro guardado, con id

        Raises:
            ValidationError: si una fecha no se puede interpretar
            StorageError: si falla la escritura
            ExportError: si el snapshot por envío está activo y falla
        """
        values = payload.model_dump()

        for campo in DATE_FIELDS:
            values[campo] = self._parse_date_field(campo, values.get(campo))

        if values["visa_application_date"] is None:
            raise ValidationError("visa_application_date", "la fecha de solicitud es obligatoria")

        values["waiting_days"] = compute_waiting_days(
            values["visa_application_date"],
            values["visa_issue_date"]
        )

        registro = self.store.insert(values)

        if self.settings.snapshot_on_submit:
            write_snapshot(self.store.list_all(), self.settings.snapshot_path)

        return registro

    @staticmethod
    def _parse_date_field(campo: str, valor) -> Optional[date]:
        try:
            return parse_date(valor)
        except ValueError as e:
            raise ValidationError(campo, str(e)) from e
