"""
Tests de los scripts de operador
"""
from app.models import RECORD_FIELDS
from app.scripts import backup_csv, import_csv
from app.services.record_store import RecordStore


class TestOperatorScripts:

    def test_backup_then_import(self, db, tmp_path):
        store = RecordStore(db)
        store.insert({"city": "Москва", "waiting_days": 12})
        path = str(tmp_path / "backup.csv")

        assert backup_csv.run(path) == 0

        store.insert({"city": "Казань"})
        assert import_csv.run(path) == 0

        db.expire_all()
        assert [(r.city, r.waiting_days) for r in RecordStore(db).list_all()] == [("Москва", 12)]

    def test_import_reports_parse_error(self, db, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text(";".join(RECORD_FIELDS) + "\nМосква;ayer\n", encoding="utf-8")

        assert import_csv.run(str(path)) == 1
