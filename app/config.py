from datetime import date, datetime
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
import pytz


class Settings(BaseSettings):
    """
    Configuración de la aplicación VISA STATS
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Permite campos extra sin error
    )

    # ==============================================
    # APLICACIÓN
    # ==============================================
    app_name: str = "VISA STATS"
    environment: str = "development"
    debug: bool = False
    port_backend: int = 3001
    log_level: str = "INFO"

    # País del consulado, solo se usa en el nombre del archivo exportado
    country: Optional[str] = None
    timezone: str = "Europe/Moscow"

    # ==============================================
    # BASE DE DATOS
    # ==============================================
    database_url: str = "sqlite:///./visa_stats.db"

    # ==============================================
    # EXPORTACIÓN Y RESPALDOS
    # ==============================================
    snapshot_on_submit: bool = False
    snapshot_path: str = "./exports/visa_stats.xlsx"
    backup_csv_path: str = "./stats_visa.csv"

    # ==============================================
    # CORS
    # ==============================================
    allowed_origins: list = Field(default_factory=lambda: ["*"])

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v):
        """Falla al arrancar si la zona horaria no existe"""
        try:
            pytz.timezone(v)
        except pytz.UnknownTimeZoneError as e:
            raise ValueError(f"zona horaria desconocida: {v}") from e
        return v

    def today(self) -> date:
        """Fecha actual en la zona horaria configurada"""
        return datetime.now(pytz.timezone(self.timezone)).date()


@lru_cache()
def get_settings() -> Settings:
    """
    Singleton para obtener settings
    """
    return Settings()


def print_settings_summary():
    """
    Imprime un resumen de la configuración al iniciar
    """
    settings = get_settings()

    print("\n" + "="*60)
    print("⚙️  VISA STATS - Configuración")
    print("="*60)

    print(f"\n📦 Aplicación:")
    print(f"  • Nombre: {settings.app_name}")
    print(f"  • Entorno: {settings.environment}")
    print(f"  • Debug: {settings.debug}")
    print(f"  • Puerto: {settings.port_backend}")
    print(f"  • País: {settings.country or '-'}")

    print(f"\n💾 Base de datos:")
    db_url = settings.database_url
    if "@" in db_url:
        # Ocultar password en el print
        print(f"  • {db_url.split('@')[1]}")
    else:
        print(f"  • {db_url[:50]}")

    print(f"\n📁 Archivos:")
    print(f"  • Snapshot XLSX: {settings.snapshot_path} (por envío: {settings.snapshot_on_submit})")
    print(f"  • Respaldo CSV: {settings.backup_csv_path}")

    print("\n" + "="*60 + "\n")


# Instancia global
settings = get_settings()


# Si ejecutas este archivo directamente, muestra el resumen
if __name__ == "__main__":
    print_settings_summary()
