"""
VISA STATS - Página principal
app/api/pages.py

Formulario de envío y dashboard en una sola página. Los filtros viajan en
la query string, así que la vista se reconstruye completa en cada request.
"""

from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session
from pathlib import Path

from app.config import Settings, get_settings
from app.core.exceptions import ValidationError
from app.database import get_db
from app.models import CITIES, VISA_CENTERS
from app.schemas.stats import DashboardState, Period
from app.services.dashboard import apply_filter, build_dashboard
from app.services.record_store import RecordStore

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

PERIOD_LABELS = {
    Period.all: "Всё время",
    Period.six_months: "Последние 6 месяцев",
    Period.one_month: "Последний месяц",
}


def format_decimal(value, decimals=2):
    """Formatear decimal"""
    try:
        return f"{float(value):.{decimals}f}"
    except (ValueError, TypeError):
        return value


templates.env.filters['format_decimal'] = format_decimal


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    city: str = "",
    visa_center: str = "",
    period: str = "",
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Página principal - Formulario y estadísticas"""
    state = DashboardState()
    state = apply_filter(state, "city", city)
    state = apply_filter(state, "visa_center", visa_center)
    try:
        state = apply_filter(state, "period", period)
    except ValidationError:
        # Un enlace viejo o editado a mano no debe romper la página
        state = apply_filter(state, "period", Period.all.value)

    view = build_dashboard(RecordStore(db).list_all(), state, settings.today())

    return templates.TemplateResponse(request, "index.html", {
        "view": view,
        "cities": CITIES,
        "visa_centers": VISA_CENTERS,
        "period_labels": PERIOD_LABELS,
        "chart_labels": [p.date.isoformat() for p in view.series],
        "chart_values": [p.average_waiting_days for p in view.series],
        "country": settings.country,
    })
