"""
Carga masiva: reemplaza la tabla visa_stats con el contenido de un CSV

Uso:
    python -m app.scripts.import_csv [ruta.csv]

Sin argumento usa BACKUP_CSV_PATH.
"""

import logging
import sys

from app.config import settings
from app.core.exceptions import ParseError, StorageError
from app.database import DatabaseSession
from app.services.transfer import import_csv

logger = logging.getLogger(__name__)


def run(path: str) -> int:
    """Devuelve el código de salida del proceso"""
    try:
        with DatabaseSession() as db:
            total = import_csv(db, path)
    except ParseError as e:
        logger.error(f"❌ CSV inválido, la tabla no se modificó: {e}")
        return 1
    except StorageError as e:
        logger.error(f"❌ Error de base de datos: {e}")
        return 1

    logger.info(f"✅ {total} registros cargados desde {path}")
    return 0


def main():
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(message)s")
    path = sys.argv[1] if len(sys.argv) > 1 else settings.backup_csv_path
    sys.exit(run(path))


if __name__ == "__main__":
    main()
