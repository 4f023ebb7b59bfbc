"""
Fixtures comunes: BD SQLite en memoria y cliente de la API
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SNAPSHOT_ON_SUBMIT"] = "false"

from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.database import Base, SessionLocal, engine, init_db
from app.main import app
from app.models import VisaStat, VisaStatus


@pytest.fixture
def db():
    init_db()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        database_url="sqlite://",
        country="Italy",
        snapshot_path=str(tmp_path / "exports" / "visa_stats.xlsx"),
        backup_csv_path=str(tmp_path / "stats_visa.csv"),
    )


@pytest.fixture
def client(db, test_settings):
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def make_record(**overrides):
    """VisaStat sin guardar, con valores completos por defecto"""
    values = {
        "city": "Москва",
        "visa_application_date": date(2024, 1, 1),
        "visa_issue_date": date(2024, 1, 11),
        "waiting_days": 10,
        "travel_purpose": "туризм",
        "planned_travel_date": date(2024, 3, 1),
        "additional_doc_request": False,
        "tickets_purchased": True,
        "hotels_purchased": True,
        "employment_certificate": "есть",
        "financial_guarantee": 1500.5,
        "comments": "",
        "visa_center": "VMS",
        "visa_status": VisaStatus.issued,
        "visa_issued_for_days": 90,
        "corridor_days": 15,
        "past_visas_trips": "2 шенгена",
        "consul": "",
        "planned_stay_in_country": "10 дней",
    }
    values.update(overrides)
    return VisaStat(**values)


@pytest.fixture
def record_factory():
    return make_record
