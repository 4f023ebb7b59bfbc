"""
VISA STATS - Estadísticas colaborativas de visas
app/main.py

Solo contiene:
- Configuración de FastAPI
- Traducción de errores de dominio a HTTP
- Registro de routers
- Health check
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
import logging

from app.config import settings
from app.core.exceptions import ExportError, StorageError, ValidationError
from app.database import init_db

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

# ============================================================================
# CREAR TABLAS EN BD
# ============================================================================

init_db()

# ============================================================================
# INICIALIZAR FASTAPI
# ============================================================================

app = FastAPI(
    title=settings.app_name,
    description="Estadísticas colaborativas de tiempos de espera de visas",
    version="1.0.0"
)

# ============================================================================
# MIDDLEWARE
# ============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================================================
# ERRORES DE DOMINIO
# ============================================================================

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.warning(f"⚠️ Dato inválido en {request.url.path}: {exc}")
    return JSONResponse(
        status_code=422,
        content={"error": "validation_error", "field": exc.field, "detail": exc.message}
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"❌ Error de base de datos en {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "storage_error", "detail": str(exc)})


@app.exception_handler(ExportError)
async def export_error_handler(request: Request, exc: ExportError):
    logger.error(f"❌ Error de exportación en {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "export_error", "detail": str(exc)})

# ============================================================================
# IMPORTAR Y REGISTRAR ROUTERS
# ============================================================================

from app.api import pages_router, visa_stats_router, export_router  # noqa: E402

# Página HTML (sin prefijo /api)
app.include_router(pages_router)

app.include_router(visa_stats_router, prefix="/api", tags=["Registros"])
app.include_router(export_router, prefix="/api", tags=["Exportación"])

# ============================================================================
# HEALTH CHECK
# ============================================================================

@app.get("/health")
async def health_check():
    """
    Health check para monitoreo.
    Verifica conexión a BD.
    """
    from app.database import SessionLocal
    from app.services.record_store import RecordStore

    db = SessionLocal()
    try:
        return {
            "status": "ok",
            "database": "connected",
            "records": RecordStore(db).count()
        }
    except StorageError as e:
        return {
            "status": "error",
            "message": str(e),
            "database": "disconnected"
        }
    finally:
        db.close()

# ============================================================================
# PUNTO DE ENTRADA
# ============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.port_backend,
        reload=settings.debug
    )
