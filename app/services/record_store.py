"""
VISA STATS - Almacén de registros
app/services/record_store.py

Acceso a la tabla visa_stats. Solo alta, listado y reemplazo total:
no hay actualización ni borrado por id.
"""

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import Dict, Iterable, List
import logging

from app.core.exceptions import StorageError
from app.models import VisaStat

logger = logging.getLogger(__name__)


class RecordStore:
    """Repositorio de VisaStat sobre una sesión de SQLAlchemy"""

    def __init__(self, db: Session):
        self.db = db

    def create_table(self) -> None:
        """Crea la tabla si no existe (idempotente)"""
        try:
            VisaStat.__table__.create(bind=self.db.get_bind(), checkfirst=True)
        except SQLAlchemyError as e:
            logger.error(f"❌ No se pudo crear la tabla visa_stats: {e}")
            raise StorageError(f"No se pudo crear la tabla: {e}") from e

    def insert(self, values: Dict) -> VisaStat:
        """
        Inserta un registro y devuelve la fila con el id asignado.

        Raises:
            StorageError: si la base de datos rechaza la escritura
        """
        values = {k: v for k, v in values.items() if k != "id"}
        registro = VisaStat(**values)
        try:
            self.db.add(registro)
            self.db.commit()
            self.db.refresh(registro)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Error guardando registro: {e}")
            raise StorageError(f"Error guardando registro: {e}") from e

        logger.info(f"✅ Registro {registro.id} guardado ({registro.city}, {registro.waiting_days} días)")
        return registro

    def list_all(self) -> List[VisaStat]:
        """Todos los registros en orden de inserción"""
        try:
            return self.db.query(VisaStat).order_by(VisaStat.id.asc()).all()
        except SQLAlchemyError as e:
            logger.error(f"❌ Error leyendo registros: {e}")
            raise StorageError(f"Error leyendo registros: {e}") from e

    def count(self) -> int:
        try:
            return self.db.query(VisaStat).count()
        except SQLAlchemyError as e:
            raise StorageError(f"Error contando registros: {e}") from e

    def replace_all(self, records: Iterable[Dict]) -> int:
        """
        Vacía la tabla e inserta todos los registros en una sola transacción.
        Si algo falla, la tabla queda como estaba.

        Returns:
            Cantidad de registros insertados
        """
        filas = [
            VisaStat(**{k: v for k, v in values.items() if k != "id"})
            for values in records
        ]
        try:
            self.db.query(VisaStat).delete(synchronize_session=False)
            self.db.add_all(filas)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Reemplazo de visa_stats cancelado: {e}")
            raise StorageError(f"Error reemplazando registros: {e}") from e

        logger.info(f"✅ Tabla visa_stats reemplazada con {len(filas)} registros")
        return len(filas)
