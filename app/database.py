"""
Configuración de la base de datos
SQLAlchemy setup (SQLite por defecto, cualquier URL soportada por SQLAlchemy)
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool
from typing import Generator
import logging

from app.config import settings

logger = logging.getLogger(__name__)


def crear_engine(database_url: str, echo: bool = False):
    """Crea el engine; SQLite necesita compartir la conexión entre hilos de FastAPI"""
    connect_args = {}
    opciones = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # En memoria: una sola conexión o cada hilo vería otra BD
            opciones["poolclass"] = StaticPool

    return create_engine(
        database_url,
        connect_args=connect_args,
        **opciones,
        pool_pre_ping=True,  # Verifica conexiones antes de usarlas
        echo=echo  # Log de queries SQL en modo debug
    )


# Crear engine de SQLAlchemy
engine = crear_engine(settings.database_url, echo=settings.debug)

# Session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Base para los modelos
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    Dependency para FastAPI
    Crea una sesión de BD para cada request y la cierra al terminar

    Uso:
        @app.get("/ejemplo")
        def ejemplo(db: Session = Depends(get_db)):
            # usar db aquí
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Inicializa la base de datos
    Crea todas las tablas si no existen
    """
    logger.info("Inicializando base de datos...")

    # Importar todos los modelos para que SQLAlchemy los conozca
    from app.models import visa_stat  # noqa: F401

    Base.metadata.create_all(bind=engine)

    logger.info("✅ Base de datos inicializada correctamente")


# Clase helper para transacciones
class DatabaseSession:
    """
    Context manager para manejar sesiones de BD fuera de un request
    (scripts de importación y respaldo)

    Uso:
        with DatabaseSession() as db:
            registros = RecordStore(db).list_all()
    """

    def __enter__(self) -> Session:
        self.db = SessionLocal()
        return self.db

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.db.rollback()
            logger.error(f"Error en transacción de BD: {exc_val}")
        self.db.close()
