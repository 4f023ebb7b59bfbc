"""
Modelo de VisaStat
Cada fila es una experiencia de trámite de visa enviada por un usuario
"""

from sqlalchemy import Column, Integer, String, Date, Boolean, Float, Text, Enum as SQLEnum

from app.database import Base
import enum


class VisaStatus(str, enum.Enum):
    """Resultado del trámite, viaja como "1"/"0" en la API y en el CSV"""
    issued = "1"
    refused = "0"


# Ciudades y centros que ofrece el formulario
CITIES = [
    "Москва",
    "Краснодар",
    "Екатеринбург",
    "Нижний Новгород",
    "Ростов-на-Дону",
    "Новосибирск",
    "Казань",
    "Самара",
    "Санкт-Петербург",
]

VISA_CENTERS = ["VMS", "Альмавива"]


class VisaStat(Base):
    """
    Modelo de registro de visa

    El id lo asigna la base de datos; waiting_days lo calcula el servidor
    """

    __tablename__ = "visa_stats"

    id = Column(Integer, primary_key=True, index=True)

    # Trámite
    city = Column(String(100), default="")
    visa_application_date = Column(Date)
    visa_issue_date = Column(Date, nullable=True)
    waiting_days = Column(Integer, nullable=True)

    # Viaje
    travel_purpose = Column(Text, default="")
    planned_travel_date = Column(Date, nullable=True)
    additional_doc_request = Column(Boolean, default=False)
    tickets_purchased = Column(Boolean, default=False)
    hotels_purchased = Column(Boolean, default=False)
    employment_certificate = Column(Text, default="")
    financial_guarantee = Column(Float, nullable=True)
    comments = Column(Text, default="")

    # Resultado
    visa_center = Column(String(100), default="")
    visa_status = Column(
        SQLEnum(VisaStatus, values_callable=lambda e: [m.value for m in e], native_enum=False, length=1),
        default=VisaStatus.issued
    )
    visa_issued_for_days = Column(Integer, nullable=True)
    corridor_days = Column(Integer, nullable=True)
    past_visas_trips = Column(Text, default="")
    consul = Column(Text, default="")
    planned_stay_in_country = Column(Text, default="")

    def __repr__(self):
        return f"<VisaStat(id={self.id}, city='{self.city}', waiting_days={self.waiting_days})>"


# Orden canónico de columnas (todas menos id), compartido por CSV y XLSX
RECORD_FIELDS = [c.name for c in VisaStat.__table__.columns if c.name != "id"]

DATE_FIELDS = ["visa_application_date", "visa_issue_date", "planned_travel_date"]
BOOLEAN_FIELDS = ["additional_doc_request", "tickets_purchased", "hotels_purchased"]
INTEGER_FIELDS = ["waiting_days", "visa_issued_for_days", "corridor_days"]
FLOAT_FIELDS = ["financial_guarantee"]
