"""
VISA STATS - Punto de entrada
main.py

uvicorn main:app  o  python main.py (usa PORT_BACKEND)
"""

import uvicorn

from app.config import settings, print_settings_summary
from app.main import app  # noqa: F401


if __name__ == "__main__":
    print_settings_summary()
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.port_backend,
        reload=settings.debug
    )
