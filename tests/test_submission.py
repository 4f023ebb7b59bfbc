"""
Tests del servicio de envío y del almacén de registros
"""
from datetime import date

import pytest
from openpyxl import load_workbook

from app.core.exceptions import StorageError, ValidationError
from app.database import Base, engine, init_db
from app.models import VisaStat, VisaStatus
from app.schemas.visa_stat import VisaStatCreate
from app.services.record_store import RecordStore
from app.services.submission import SubmissionService, compute_waiting_days


def payload(**overrides):
    data = {
        "city": "Москва",
        "visa_application_date": "2024-01-01",
        "visa_issue_date": "2024-01-11",
        "visa_center": "VMS",
        "visa_status": "1",
    }
    data.update(overrides)
    return VisaStatCreate(**data)


class TestComputeWaitingDays:

    def test_ten_days(self):
        assert compute_waiting_days(date(2024, 1, 1), date(2024, 1, 11)) == 10

    def test_issue_before_application_is_negative(self):
        assert compute_waiting_days(date(2024, 1, 11), date(2024, 1, 1)) == -10

    def test_missing_issue_date(self):
        assert compute_waiting_days(date(2024, 1, 1), None) is None


class TestSubmissionService:

    def test_submit_assigns_id_and_waiting_days(self, db, test_settings):
        registro = SubmissionService(db, test_settings).submit(payload())

        assert registro.id is not None
        assert registro.waiting_days == 10
        assert registro.visa_application_date == date(2024, 1, 1)
        assert registro.visa_status is VisaStatus.issued

    def test_negative_waiting_days_are_stored_not_rejected(self, db, test_settings):
        registro = SubmissionService(db, test_settings).submit(
            payload(visa_application_date="2024-02-01", visa_issue_date="2024-01-25")
        )

        guardado = RecordStore(db).list_all()
        assert registro.waiting_days == -7
        assert guardado[0].waiting_days == -7

    def test_legacy_dotted_dates_are_converted(self, db, test_settings):
        registro = SubmissionService(db, test_settings).submit(
            payload(visa_application_date="01.01.2024", visa_issue_date="11.01.2024")
        )
        assert registro.visa_issue_date == date(2024, 1, 11)
        assert registro.waiting_days == 10

    def test_visa_not_yet_issued(self, db, test_settings):
        registro = SubmissionService(db, test_settings).submit(payload(visa_issue_date=""))
        assert registro.visa_issue_date is None
        assert registro.waiting_days is None

    def test_unparseable_date_raises_validation_error(self, db, test_settings):
        with pytest.raises(ValidationError) as exc:
            SubmissionService(db, test_settings).submit(payload(visa_issue_date="mañana"))

        assert exc.value.field == "visa_issue_date"
        assert RecordStore(db).count() == 0

    def test_application_date_is_required(self, db, test_settings):
        with pytest.raises(ValidationError):
            SubmissionService(db, test_settings).submit(payload(visa_application_date=" "))

    def test_snapshot_written_when_enabled(self, db, test_settings):
        settings = test_settings.model_copy(update={"snapshot_on_submit": True})
        SubmissionService(db, settings).submit(payload())
        SubmissionService(db, settings).submit(payload(city="Казань"))

        hoja = load_workbook(settings.snapshot_path)["Visa Stats"]
        assert hoja.max_row == 3

    def test_empty_numeric_form_fields_become_none(self):
        data = payload(financial_guarantee="", corridor_days="", comments=None)
        assert data.financial_guarantee is None
        assert data.corridor_days is None
        assert data.comments == ""


class TestRecordStore:

    def test_insert_assigns_increasing_ids(self, db, record_factory):
        store = RecordStore(db)
        primero = store.insert({"city": "Москва", "waiting_days": 3})
        segundo = store.insert({"city": "Казань", "waiting_days": 5, "id": 999})

        assert segundo.id > primero.id
        assert segundo.id != 999

    def test_list_all_in_insertion_order(self, db):
        store = RecordStore(db)
        for ciudad in ("Самара", "Казань", "Москва"):
            store.insert({"city": ciudad})

        assert [r.city for r in store.list_all()] == ["Самара", "Казань", "Москва"]

    def test_create_table_is_idempotent(self, db):
        store = RecordStore(db)
        store.create_table()
        store.create_table()
        assert store.count() == 0

    def test_init_db_keeps_existing_rows(self, db):
        RecordStore(db).insert({"city": "Самара"})
        init_db()
        assert RecordStore(db).count() == 1

    def test_replace_all_discards_previous_rows(self, db):
        store = RecordStore(db)
        store.insert({"city": "Самара"})

        total = store.replace_all([{"city": "Москва"}, {"city": "Казань"}])

        assert total == 2
        assert [r.city for r in store.list_all()] == ["Москва", "Казань"]

    def test_read_failure_raises_storage_error(self, db):
        Base.metadata.drop_all(bind=engine)
        with pytest.raises(StorageError):
            RecordStore(db).list_all()
