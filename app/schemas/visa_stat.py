"""
Schemas de Pydantic para VisaStat
Validación de datos de entrada/salida
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import date

from app.models.visa_stat import VisaStatus


class VisaStatCreate(BaseModel):
    """
    Schema para enviar una experiencia nueva

    Las fechas llegan como texto; el servicio de envío las interpreta
    (YYYY-MM-DD, o DD.MM.YYYY de clientes antiguos). No incluye id ni
    waiting_days: ambos los pone el servidor.
    """
    city: str = "Москва"
    visa_application_date: str = Field(..., description="Fecha de solicitud")
    visa_issue_date: Optional[str] = Field(None, description="Fecha de emisión, vacía si aún no se emite")
    travel_purpose: str = ""
    planned_travel_date: Optional[str] = None
    additional_doc_request: bool = False
    tickets_purchased: bool = False
    hotels_purchased: bool = False
    employment_certificate: str = ""
    financial_guarantee: Optional[float] = None
    comments: str = ""
    visa_center: str = "VMS"
    visa_status: VisaStatus = VisaStatus.issued
    visa_issued_for_days: Optional[int] = None
    corridor_days: Optional[int] = None
    past_visas_trips: str = ""
    consul: str = ""
    planned_stay_in_country: str = ""

    @field_validator("financial_guarantee", "visa_issued_for_days", "corridor_days", mode="before")
    @classmethod
    def empty_number_is_none(cls, v):
        """Los inputs numéricos vacíos del formulario llegan como ''"""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator(
        "city", "travel_purpose", "employment_certificate", "comments", "visa_center",
        "past_visas_trips", "consul", "planned_stay_in_country",
        mode="before"
    )
    @classmethod
    def none_text_is_empty(cls, v):
        return "" if v is None else v


class VisaStatResponse(BaseModel):
    """Schema de respuesta: el registro completo tal como quedó guardado"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    city: str
    visa_application_date: Optional[date] = None
    visa_issue_date: Optional[date] = None
    waiting_days: Optional[int] = None
    travel_purpose: str = ""
    planned_travel_date: Optional[date] = None
    additional_doc_request: bool = False
    tickets_purchased: bool = False
    hotels_purchased: bool = False
    employment_certificate: str = ""
    financial_guarantee: Optional[float] = None
    comments: str = ""
    visa_center: str = ""
    visa_status: Optional[VisaStatus] = None
    visa_issued_for_days: Optional[int] = None
    corridor_days: Optional[int] = None
    past_visas_trips: str = ""
    consul: str = ""
    planned_stay_in_country: str = ""
