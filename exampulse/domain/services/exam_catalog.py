"""
ExamPulse – Domain Service: Exam Catalog
==========================================
Materias y cantidad de preguntas por materia de cada examen YKS, el
cálculo de net y la construcción de un ExamResult a partir de la
hoja de respuestas que carga el estudiante.

NET:
    net = correctas - 0.25 * incorrectas   (4 incorrectas anulan 1 correcta)
    Las preguntas en blanco no suman ni restan.

HOJA DE RESPUESTAS:
  Cada conteo (D/Y/B) se recorta a [0, límite de la materia]. Después
  del recorte, correctas + incorrectas + blancas de una materia no
  pueden superar su límite: eso es un error de carga, no algo que se
  pueda recortar sin inventar datos.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Mapping

from exampulse.domain.entities.exam_result import ExamResult, ExamType, SubjectScore
from exampulse.domain.exceptions.domain_errors import ValidationError

WRONG_ANSWER_PENALTY = 0.25
DEFAULT_RESULT_NAME = "Yeni Deneme"

# Orden = orden del formulario
_QUESTION_LIMITS: dict[ExamType, dict[str, int]] = {
    ExamType.TYT: {
        "Türkçe": 40,
        "Matematik": 40,
        "Coğrafya": 5,
        "Fizik": 7,
        "Kimya": 7,
        "Biyoloji": 6,
        "Tarih": 5,
        "Felsefe": 5,
        "Din Kültürü ve Ahlak Bilgisi": 5,
    },
    ExamType.AYT: {
        "Türk Dili ve Edebiyatı": 24,
        "Tarih/1": 10,
        "Coğrafya/1": 6,
        "Tarih/2": 11,
        "Coğrafya/2": 11,
        "Felsefe Grubu": 12,
        "Din Kültürü ve Ahlak Bilgisi": 6,
        "Matematik": 40,
        "Fizik": 14,
        "Kimya": 13,
        "Biyoloji": 13,
    },
    ExamType.YDT: {
        "Kelime Bilgisi": 5,
        "Dilbilgisi": 10,
        "Cloze Test": 5,
        "Cümleyi Tamamlama": 8,
        "İngilizce Cümlenin Türkçe Karşılığını Bulma": 6,
        "Türkçe Cümlenin İngilizce Karşılığını Bulma": 6,
        "Paragraf": 15,
        "Anlamca Yakın Cümleyi Bulma": 5,
        "Paragrafta Anlam Bütünlüğünü Sağlayacak Cümleyi Bulma": 5,
        "Verilen Durumda Söylenecek İfadeyi Bulma": 5,
        "Diyalog Tamamlama": 5,
        "Anlam Bütünlüğünü Bozan Cümleyi Bulma": 5,
    },
}


@dataclass(frozen=True, slots=True)
class SubjectAnswers:
    """Conteos cargados para una materia (D / Y / B)."""

    correct: int = 0
    wrong: int = 0
    empty: int = 0


def subjects_for(exam_type: ExamType | str) -> list[str]:
    """Materias del examen en el orden del formulario."""
    return list(_QUESTION_LIMITS[ExamType(exam_type)])


def question_limits(exam_type: ExamType | str) -> dict[str, int]:
    """Copia del mapa materia → cantidad de preguntas."""
    return dict(_QUESTION_LIMITS[ExamType(exam_type)])


def total_questions(exam_type: ExamType | str) -> int:
    return sum(_QUESTION_LIMITS[ExamType(exam_type)].values())


def compute_net(correct: int, wrong: int) -> float:
    """correctas - 0.25 * incorrectas."""
    return float(correct) - float(wrong) * WRONG_ANSWER_PENALTY


def _clamp(value: int, limit: int) -> int:
    return max(0, min(int(value), limit))


def build_exam_result(
    name: str,
    exam_type: ExamType | str,
    date: datetime,
    answers: Mapping[str, SubjectAnswers],
    result_id: str | None = None,
) -> ExamResult:
    """
    Construye un ExamResult desde la hoja de respuestas.

    Todas las materias del examen aparecen en subject_scores (las no
    cargadas con net 0), en el orden del catálogo.

    Raises:
        ValidationError: materia desconocida o materia con más
                         respuestas que preguntas.
    """
    exam_type = ExamType(exam_type)
    limits = _QUESTION_LIMITS[exam_type]

    unknown = [s for s in answers if s not in limits]
    if unknown:
        raise ValidationError(
            f"Materias no válidas para {exam_type.value}: {', '.join(unknown)}",
            field="answers", value=unknown,
        )

    scores: list[SubjectScore] = []
    correct_sum = wrong_sum = empty_sum = 0
    for subject, limit in limits.items():
        sheet = answers.get(subject, SubjectAnswers())
        correct = _clamp(sheet.correct, limit)
        wrong = _clamp(sheet.wrong, limit)
        empty = _clamp(sheet.empty, limit)

        if correct + wrong + empty > limit:
            raise ValidationError(
                f"{subject}: {correct + wrong + empty} respuestas para {limit} preguntas",
                field=subject, value=correct + wrong + empty,
            )

        scores.append(SubjectScore(subject=subject, score=compute_net(correct, wrong)))
        correct_sum += correct
        wrong_sum += wrong
        empty_sum += empty

    return ExamResult(
        id=result_id or ExamResult.generate_id(),
        name=name.strip() or DEFAULT_RESULT_NAME,
        exam_type=exam_type,
        date=date,
        total_questions=sum(limits.values()),
        correct_answers=correct_sum,
        wrong_answers=wrong_sum,
        empty_answers=empty_sum,
        net_score=sum(s.score for s in scores),
        subject_scores=tuple(scores),
    )
