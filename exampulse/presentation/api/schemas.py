"""
ExamPulse – API Schemas (Pydantic)
=====================================
Schemas de validación para request/response de la API REST.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, Field

from exampulse.domain.entities.exam_result import ExamType
from exampulse.domain.services.exam_catalog import SubjectAnswers


class HealthResponse(BaseModel):
    status: str
    service: str
    results: int


class SubjectAnswersSchema(BaseModel):
    """D / Y / B de una materia. Se recortan al límite de la materia."""
    correct: int = 0
    wrong: int = 0
    empty: int = 0

    def to_domain(self) -> SubjectAnswers:
        return SubjectAnswers(correct=self.correct, wrong=self.wrong, empty=self.empty)


class RecordExamResultRequest(BaseModel):
    """Body para registrar un deneme."""
    name: str = Field(default="", max_length=120)
    exam_type: ExamType
    date: datetime
    answers: Dict[str, SubjectAnswersSchema] = Field(default_factory=dict)


class CatalogResponse(BaseModel):
    exam_type: ExamType
    subjects: List[str]
    question_limits: Dict[str, int]
    total_questions: int
