"""
ExamPulse – Settings (Pydantic BaseSettings)
=============================================
Configuración centralizada cargada desde variables de entorno / .env.
Se usa pydantic-settings para validación estricta al arranque: un
EXAMPULSE_DEFAULT_TIME_RANGE o EXAMPULSE_SUBJECT_AVERAGING desconocido
falla al cargar Settings, no al construir el caso de uso.

Las variables se leen con prefijo EXAMPULSE_ (p.ej. EXAMPULSE_PORT=9000).
"""

from __future__ import annotations

from pydantic_settings import BaseSettings
from pydantic import Field

from exampulse.domain.value_objects.analytics_options import SubjectAveraging, TimeRange


class Settings(BaseSettings):
    # ─── Server ─────────────────────────────────────────────────────────
    app_name: str = Field(default="ExamPulse", description="Nombre mostrado en logs y OpenAPI")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8890)
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO", description="Nivel del root logger")

    # ─── Analytics ──────────────────────────────────────────────────────
    default_time_range: TimeRange = Field(
        default=TimeRange.LAST_MONTH,
        description="Rango temporal por defecto del resumen de progreso",
    )
    subject_averaging: SubjectAveraging = Field(
        default=SubjectAveraging.MEAN,
        description="Promedio por materia para mejor/peor materia: mean | running_pairwise",
    )
    trend_threshold: float = Field(
        default=2.0,
        description="Diferencia mínima (en net) para clasificar una tendencia",
    )

    # ─── Result Store ───────────────────────────────────────────────────
    max_results: int = Field(
        default=1000, description="Máximo de resultados en memoria (los más antiguos se descartan)",
    )
    seed_sample_data: bool = Field(
        default=False, description="Cargar los 5 denemes de ejemplo al arrancar",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "EXAMPULSE_",
        "case_sensitive": False,
    }


# Singleton global – se importa donde se necesite
settings = Settings()
