"""
VISA STATS - Estadísticas de espera
app/services/aggregation.py

Funciones puras sobre una colección de registros: filtrado por ciudad,
centro y ventana de tiempo; resumen (promedio, máximo, mínimo, últimos N);
y la serie por fecha de solicitud que alimenta el gráfico.

Los registros pueden ser filas de VisaStat o cualquier objeto con los
mismos atributos.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd

from app.schemas.stats import DatePoint, Period, WaitingSummary

LAST_N = 10

MESES_POR_PERIODO = {
    Period.six_months: 6,
    Period.one_month: 1,
}


@dataclass(frozen=True)
class StatsFilter:
    """Filtros activos; cadena vacía = sin restricción"""
    city: str = ""
    visa_center: str = ""
    period: Period = Period.all


def parse_period(value: Optional[str]) -> Period:
    """'' o None equivalen a 'all'"""
    if not value:
        return Period.all
    return Period(value)


def period_start(period: Period, today: date) -> Optional[date]:
    """Primer día incluido en la ventana, None para 'all'"""
    meses = MESES_POR_PERIODO.get(period)
    if meses is None:
        return None
    return (pd.Timestamp(today) - pd.DateOffset(months=meses)).date()


def filter_records(records: Iterable, filters: StatsFilter, today: Optional[date] = None) -> List:
    """
    AND de todos los filtros activos.

    La ventana de tiempo se evalúa sobre visa_issue_date; con una ventana
    activa, los registros sin fecha de emisión quedan fuera.
    """
    resultado = list(records)

    if filters.city:
        resultado = [r for r in resultado if r.city == filters.city]

    if filters.visa_center:
        resultado = [r for r in resultado if r.visa_center == filters.visa_center]

    desde = period_start(filters.period, today or date.today())
    if desde is not None:
        resultado = [
            r for r in resultado
            if r.visa_issue_date is not None and r.visa_issue_date >= desde
        ]

    return resultado


def _waiting_days(records: Iterable) -> List[int]:
    return [r.waiting_days for r in records if r.waiting_days is not None]


def summarize(records: Sequence, last_n: int = LAST_N) -> WaitingSummary:
    """
    Promedio, máximo y mínimo de waiting_days, y los últimos N valores
    en el orden de entrada. Todo en cero si no hay datos.
    """
    dias = _waiting_days(records)
    if not dias:
        return WaitingSummary()

    return WaitingSummary(
        mean=sum(dias) / len(dias),
        max=max(dias),
        min=min(dias),
        last_n=dias[-last_n:] if last_n > 0 else []
    )


def series_by_date(records: Iterable) -> List[DatePoint]:
    """Promedio de waiting_days por visa_application_date, ordenado por fecha"""
    grupos: Dict[date, List[int]] = defaultdict(list)

    for r in records:
        if r.visa_application_date is None or r.waiting_days is None:
            continue
        grupos[r.visa_application_date].append(r.waiting_days)

    return [
        DatePoint(date=fecha, average_waiting_days=sum(dias) / len(dias))
        for fecha, dias in sorted(grupos.items())
    ]


def distinct_values(records: Iterable, field: str) -> List[str]:
    """Valores distintos de un campo para los selectores de filtro"""
    return sorted({getattr(r, field) or "" for r in records})
