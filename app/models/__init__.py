from app.models.visa_stat import (
    VisaStat,
    VisaStatus,
    CITIES,
    VISA_CENTERS,
    RECORD_FIELDS,
    DATE_FIELDS,
    BOOLEAN_FIELDS,
    INTEGER_FIELDS,
    FLOAT_FIELDS,
)

__all__ = [
    "VisaStat",
    "VisaStatus",
    "CITIES",
    "VISA_CENTERS",
    "RECORD_FIELDS",
    "DATE_FIELDS",
    "BOOLEAN_FIELDS",
    "INTEGER_FIELDS",
    "FLOAT_FIELDS",
]
