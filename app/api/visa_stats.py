"""
VISA STATS - API de Registros
app/api/visa_stats.py

Alta y listado de experiencias, y el resumen filtrado para el dashboard.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from app.config import Settings, get_settings
from app.database import get_db
from app.schemas.stats import DashboardState, DashboardView
from app.schemas.visa_stat import VisaStatCreate, VisaStatResponse
from app.services.dashboard import apply_filter, build_dashboard
from app.services.record_store import RecordStore
from app.services.submission import SubmissionService

router = APIRouter()


@router.post("/visa-stats", response_model=VisaStatResponse, status_code=201)
async def crear_registro(
    payload: VisaStatCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Registra una experiencia nueva.

    El servidor asigna el id y calcula waiting_days; la respuesta es el
    registro completo tal como quedó guardado.
    """
    return SubmissionService(db, settings).submit(payload)


@router.get("/visa-stats", response_model=List[VisaStatResponse])
async def listar_registros(db: Session = Depends(get_db)):
    """Todos los registros en orden de envío"""
    return RecordStore(db).list_all()


@router.get("/visa-stats/summary", response_model=DashboardView)
async def resumen_registros(
    city: str = "",
    visa_center: str = "",
    period: str = "",
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Promedio, máximo, mínimo, últimos 10 y serie por fecha, con filtros"""
    state = DashboardState()
    state = apply_filter(state, "city", city)
    state = apply_filter(state, "visa_center", visa_center)
    state = apply_filter(state, "period", period)

    return build_dashboard(RecordStore(db).list_all(), state, settings.today())
