"""
ExamResult – Domain Entity
============================
Resultado de un deneme (examen de práctica) tal como lo registra el
estudiante.

DECISIONES DE DISEÑO:
- frozen=True → una vez almacenado no se modifica. Corregir un
  resultado significa registrar uno nuevo.
- subject_scores es tuple (inmutable) y conserva el orden en que
  se cargaron las materias.
- score_percentage es una propiedad: se calcula en cada lectura y
  nunca se guarda, así net_score y total_questions no pueden
  desincronizarse.
- date se guarda SIEMPRE naive en UTC. Una fecha con zona horaria se
  convierte a UTC y pierde el tzinfo; una naive se asume ya en UTC.
  Así el orden y las ventanas temporales nunca comparan naive con aware.

INVARIANTES (validadas en __post_init__):
- total_questions > 0
- correct, wrong, empty >= 0
- correct + wrong + empty <= total_questions
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from exampulse.domain.exceptions.domain_errors import InvalidExamResultError


def to_naive_utc(value: datetime) -> datetime:
    """Fecha naive en UTC (las naive se devuelven tal cual)."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class ExamType(str, Enum):
    """Categorías de examen (YKS)."""
    TYT = "TYT"  # Temel Yeterlilik Testi
    AYT = "AYT"  # Alan Yeterlilik Testi
    YDT = "YDT"  # Yabancı Dil Testi


@dataclass(frozen=True, slots=True)
class SubjectScore:
    """Net obtenido en una materia. Pertenece a su ExamResult."""

    subject: str
    score: float

    def to_dict(self) -> dict:
        return {"subject": self.subject, "score": round(self.score, 2)}


@dataclass(frozen=True, slots=True)
class ExamResult:
    """Resultado inmutable de un deneme."""

    id: str
    name: str
    exam_type: ExamType
    date: datetime
    total_questions: int
    correct_answers: int
    wrong_answers: int
    empty_answers: int
    net_score: float
    subject_scores: tuple = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.subject_scores, tuple):
            object.__setattr__(self, "subject_scores", tuple(self.subject_scores))
        object.__setattr__(self, "date", to_naive_utc(self.date))

        if self.total_questions <= 0:
            raise InvalidExamResultError(
                "total_questions debe ser positivo",
                field="total_questions", value=self.total_questions,
            )
        for name in ("correct_answers", "wrong_answers", "empty_answers"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidExamResultError(
                    f"{name} no puede ser negativo", field=name, value=value,
                )
        answered = self.correct_answers + self.wrong_answers + self.empty_answers
        if answered > self.total_questions:
            raise InvalidExamResultError(
                f"correct+wrong+empty ({answered}) supera total_questions "
                f"({self.total_questions})",
                field="total_questions", value=self.total_questions,
            )

    @property
    def score_percentage(self) -> float:
        """net / total * 100."""
        return self.net_score / self.total_questions * 100.0

    def score_for(self, subject: str) -> SubjectScore | None:
        """Primer SubjectScore de la materia, o None si no se rindió."""
        for score in self.subject_scores:
            if score.subject == subject:
                return score
        return None

    def to_dict(self) -> dict:
        """Serialización para API REST."""
        return {
            "id": self.id,
            "name": self.name,
            "exam_type": self.exam_type.value,
            "date": self.date.isoformat(),
            "total_questions": self.total_questions,
            "correct_answers": self.correct_answers,
            "wrong_answers": self.wrong_answers,
            "empty_answers": self.empty_answers,
            "net_score": round(self.net_score, 2),
            "score_percentage": round(self.score_percentage, 2),
            "subject_scores": [s.to_dict() for s in self.subject_scores],
        }

    @staticmethod
    def generate_id() -> str:
        """ID compacto único (12 chars hex de UUID4)."""
        return uuid.uuid4().hex[:12]
