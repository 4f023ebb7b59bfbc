"""
Respaldo: vuelca la tabla visa_stats a un CSV separado por ';'

Uso:
    python -m app.scripts.backup_csv [ruta.csv]

Sin argumento usa BACKUP_CSV_PATH.
"""

import logging
import sys

from app.config import settings
from app.core.exceptions import StorageError
from app.database import DatabaseSession
from app.services.transfer import backup_csv

logger = logging.getLogger(__name__)


def run(path: str) -> int:
    try:
        with DatabaseSession() as db:
            backup_csv(db, path)
    except StorageError as e:
        logger.error(f"❌ Error leyendo la base de datos: {e}")
        return 1
    except OSError as e:
        logger.error(f"❌ No se pudo escribir {path}: {e}")
        return 1
    return 0


def main():
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(message)s")
    path = sys.argv[1] if len(sys.argv) > 1 else settings.backup_csv_path
    sys.exit(run(path))


if __name__ == "__main__":
    main()
