"""
Schemas de estadísticas y del estado del dashboard
"""

from pydantic import BaseModel, Field
from typing import Dict, List
import datetime
import enum


class Period(str, enum.Enum):
    """Ventana de tiempo sobre visa_issue_date"""
    all = "all"
    six_months = "6months"
    one_month = "1month"


class WaitingSummary(BaseModel):
    """Resumen de días de espera"""
    mean: float = 0
    max: int = 0
    min: int = 0
    last_n: List[int] = Field(default_factory=list)


class DatePoint(BaseModel):
    """Un punto del gráfico: promedio de espera por fecha de solicitud"""
    date: datetime.date
    average_waiting_days: float


class DashboardState(BaseModel):
    """
    Estado serializable de los filtros del dashboard.
    Cadena vacía = sin filtro.
    """
    city: str = ""
    visa_center: str = ""
    period: Period = Period.all


class DashboardView(BaseModel):
    """Todo lo que necesita la página para pintarse"""
    state: DashboardState
    options: Dict[str, List[str]]
    total: int
    summary: WaitingSummary
    series: List[DatePoint]
