"""
VISA STATS - Estado del dashboard
app/services/dashboard.py

El estado de los filtros es un DashboardState inmutable: apply_filter
devuelve uno nuevo y build_dashboard calcula la vista a partir de
(registros, estado) sin guardar nada.
"""

from datetime import date
from typing import Sequence

from app.core.exceptions import ValidationError
from app.schemas.stats import DashboardState, DashboardView
from app.services.aggregation import (
    StatsFilter,
    distinct_values,
    filter_records,
    parse_period,
    series_by_date,
    summarize,
)

FILTER_FIELDS = ("city", "visa_center")


def apply_filter(state: DashboardState, key: str, value: str) -> DashboardState:
    """
    Cambia un filtro y devuelve el estado nuevo.

    Raises:
        ValidationError: si la clave o el periodo no existen
    """
    if key == "period":
        try:
            return state.model_copy(update={"period": parse_period(value)})
        except ValueError as e:
            raise ValidationError("period", f"periodo desconocido '{value}'") from e

    if key not in FILTER_FIELDS:
        raise ValidationError(key, "filtro desconocido")

    return state.model_copy(update={key: value or ""})


def build_dashboard(records: Sequence, state: DashboardState, today: date) -> DashboardView:
    filtros = StatsFilter(city=state.city, visa_center=state.visa_center, period=state.period)
    filtrados = filter_records(records, filtros, today)

    return DashboardView(
        state=state,
        # Las opciones salen de todos los registros, no de los filtrados
        options={campo: distinct_values(records, campo) for campo in FILTER_FIELDS},
        total=len(filtrados),
        summary=summarize(filtrados),
        series=series_by_date(filtrados),
    )
