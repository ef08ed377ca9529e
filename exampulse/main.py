"""
ExamPulse – Main Application Entry Point
============================================
Orquesta los componentes: Result Store + Use Cases + API REST.

ARQUITECTURA DE ARRANQUE:
  1. Configurar logging
  2. Crear el contenedor (repositorio en memoria)
  3. FastAPI startup:
     a. Cargar denemes de ejemplo (si seed_sample_data)
     b. Inyectar casos de uso en el router
  4. FastAPI shutdown: log del estado final

FLUJO DE DATOS:
  POST /api/results → RecordExamResultUseCase → exam_catalog → Repository
  GET  /api/analytics/* → ExamAnalyticsUseCase → result_analytics → JSON

  uvicorn exampulse.main:app --reload --host 0.0.0.0 --port 8890
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from exampulse.container import get_container
from exampulse.domain.exceptions.domain_errors import DomainError
from exampulse.infrastructure.persistence.sample_data import seed_repository
from exampulse.presentation.api.routes import domain_error_handler, init_routes, router
from exampulse.shared.config.settings import settings
from exampulse.shared.logging.logger import get_logger, setup_logging

# ─── Logging ────────────────────────────────────────────────────────────
setup_logging(settings.log_level.upper())
logger = get_logger("main")


# ─── FastAPI Lifespan ───────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle de la aplicación."""
    container = get_container()
    cfg = container.settings

    logger.info("=" * 60)
    logger.info("  %s - Exam Result Analytics", cfg.app_name)
    logger.info("  Rango por defecto: %s", cfg.default_time_range.value)
    logger.info("  Promedio por materia: %s", cfg.subject_averaging.value)
    logger.info("  Umbral de tendencia: ±%.1f net", cfg.trend_threshold)
    logger.info("  Capacidad: %d resultados en memoria", cfg.max_results)
    logger.info("=" * 60)

    if cfg.seed_sample_data:
        added = seed_repository(container.exam_result_repository)
        logger.info("  Datos de ejemplo: %d denemes cargados", added)

    # Inyectar dependencias al router (desde container)
    init_routes(
        container.get_record_exam_result_usecase(),
        container.get_exam_analytics_usecase(),
    )
    logger.info("✓ Todos los componentes iniciados correctamente")

    yield  # ← La app está corriendo aquí

    logger.info(
        "Shutdown | %d resultados en memoria (se pierden al salir)",
        container.exam_result_repository.count(),
    )
    init_routes(None, None)


# ─── FastAPI App ────────────────────────────────────────────────────────

app = FastAPI(
    title="ExamPulse",
    description="Analítica de denemes YKS: promedios por materia, progreso y tendencias",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS para la app móvil / frontend local
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(DomainError, domain_error_handler)

# Rutas
app.include_router(router)


def run() -> None:
    """Entry point de consola: exampulse."""
    import uvicorn

    uvicorn.run(
        "exampulse.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
