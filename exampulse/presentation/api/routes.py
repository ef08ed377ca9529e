"""
ExamPulse – API Routes (FastAPI)
===================================
Endpoints REST sobre los casos de uso.

Endpoints disponibles:
  GET  /api/health                      → health check
  GET  /api/catalog/{exam_type}         → materias y límites del examen
  GET  /api/results                     → resultados (filtro ?category=)
  POST /api/results                     → registrar deneme (hoja de respuestas)
  GET  /api/results/{result_id}         → un resultado
  GET  /api/analytics/subjects          → promedio por materia
  GET  /api/analytics/progress          → resumen de progreso
  GET  /api/analytics/trend/{subject}   → tendencia de una materia
  GET  /api/analytics/insights          → resumen + promedios + tendencias

Los DomainError se convierten en JSON {"error", "message"} con
domain_error_handler (registrado en main.py).
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from exampulse.domain.entities.exam_result import ExamType
from exampulse.domain.exceptions.domain_errors import (
    DomainError,
    DuplicateExamResultError,
    ExamResultNotFoundError,
    ValidationError,
)
from exampulse.domain.services import exam_catalog
from exampulse.domain.value_objects.analytics_options import (
    ResultFilter,
    SubjectAveraging,
    TimeRange,
)
from exampulse.application.dto.analytics_dto import RecordExamResultRequestDTO
from exampulse.presentation.api.schemas import (
    CatalogResponse,
    HealthResponse,
    RecordExamResultRequest,
)
from exampulse.shared.logging.logger import get_logger

logger = get_logger("api.routes")

router = APIRouter()

# Referencias a casos de uso inyectados desde main.py
_record_result = None
_analytics = None


def init_routes(record_result, analytics) -> None:
    """Inyectar dependencias desde main.py al arrancar."""
    global _record_result, _analytics
    _record_result = record_result
    _analytics = analytics


def _ready(component):
    if component is None:
        raise HTTPException(status_code=503, detail="Server not ready")
    return component


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """DomainError → respuesta JSON con el código HTTP correspondiente."""
    if isinstance(exc, ExamResultNotFoundError):
        status = 404
    elif isinstance(exc, DuplicateExamResultError):
        status = 409
    elif isinstance(exc, ValidationError):
        status = 422
    else:
        status = 400
    logger.warning("%s %s → %d %s", request.method, request.url.path, status, exc.code)
    return JSONResponse(status_code=status, content=exc.to_dict())


# ─── Estado ────────────────────────────────────────────────────────────

@router.get("/api/health", response_model=HealthResponse)
async def health_check() -> dict:
    """Health check para monitoreo."""
    count = len(_analytics.list_results()) if _analytics else 0
    return {"status": "ok", "service": "exampulse", "results": count}


@router.get("/api/catalog/{exam_type}", response_model=CatalogResponse)
async def get_catalog(exam_type: ExamType) -> dict:
    """Materias y cantidad de preguntas de un examen."""
    return {
        "exam_type": exam_type,
        "subjects": exam_catalog.subjects_for(exam_type),
        "question_limits": exam_catalog.question_limits(exam_type),
        "total_questions": exam_catalog.total_questions(exam_type),
    }


# ─── Resultados ────────────────────────────────────────────────────────

@router.get("/api/results")
async def list_results(category: ResultFilter = ResultFilter.ALL) -> dict:
    """Resultados de la categoría, más reciente primero."""
    results = _ready(_analytics).list_results(category)
    return {
        "category": category.value,
        "count": len(results),
        "results": [r.to_dict() for r in results],
    }


@router.post("/api/results", status_code=201)
async def record_result(body: RecordExamResultRequest) -> dict:
    """Registrar un deneme a partir de la hoja de respuestas."""
    request = RecordExamResultRequestDTO(
        name=body.name,
        exam_type=body.exam_type,
        date=body.date,
        answers={subject: a.to_domain() for subject, a in body.answers.items()},
    )
    result = _ready(_record_result).execute(request)
    return result.to_dict()


@router.get("/api/results/{result_id}")
async def get_result(result_id: str) -> dict:
    return _ready(_analytics).get_result(result_id).to_dict()


# ─── Analítica ─────────────────────────────────────────────────────────

@router.get("/api/analytics/subjects")
async def get_subject_averages(category: ResultFilter = ResultFilter.ALL) -> dict:
    """Promedio por materia (datos del gráfico), mayor primero."""
    averages = _ready(_analytics).chart_data(category)
    return {
        "category": category.value,
        "subjects": [s.to_dict() for s in averages],
    }


@router.get("/api/analytics/progress")
async def get_progress(
    category: ResultFilter = ResultFilter.ALL,
    time_range: Optional[TimeRange] = Query(default=None),
    averaging: Optional[SubjectAveraging] = Query(default=None),
) -> dict:
    """Resumen de progreso. Sin time_range se usa el default configurado."""
    summary = _ready(_analytics).progress(
        category=category, time_range=time_range, averaging=averaging,
    )
    return summary.to_dict()


@router.get("/api/analytics/trend/{subject}")
async def get_subject_trend(subject: str, category: ResultFilter = ResultFilter.ALL) -> dict:
    trend = _ready(_analytics).subject_trend(subject, category)
    return {"subject": subject, "category": category.value, "trend": trend.value}


@router.get("/api/analytics/insights")
async def get_insights(
    category: ResultFilter = ResultFilter.ALL,
    time_range: Optional[TimeRange] = Query(default=None),
) -> dict:
    return _ready(_analytics).insights(category=category, time_range=time_range).to_dict()
