"""
Denemes de ejemplo (2 AYT + 3 TYT, marzo–abril 2025).

Se cargan al arrancar cuando EXAMPULSE_SEED_SAMPLE_DATA=true; también
sirven como fixture realista en los tests.
"""

from __future__ import annotations

from datetime import datetime

from exampulse.domain.entities.exam_result import ExamResult, ExamType, SubjectScore
from exampulse.domain.repositories.exam_result_repository import IExamResultRepository


def _scores(*pairs: tuple[str, float]) -> tuple[SubjectScore, ...]:
    return tuple(SubjectScore(subject=s, score=v) for s, v in pairs)


def sample_results() -> list[ExamResult]:
    """Los 5 resultados de ejemplo, más reciente primero."""
    results = [
        ExamResult(
            id="sample-tyt-1", name="TYT Deneme 1", exam_type=ExamType.TYT,
            date=datetime(2025, 4, 10), total_questions=120,
            correct_answers=85, wrong_answers=25, empty_answers=10, net_score=78.75,
            subject_scores=_scores(
                ("Türkçe", 32.5), ("Matematik", 25.0), ("Fizik", 7.5),
                ("Kimya", 6.25), ("Biyoloji", 5.0), ("Tarih", 2.5),
            ),
        ),
        ExamResult(
            id="sample-tyt-2", name="TYT Deneme 2", exam_type=ExamType.TYT,
            date=datetime(2025, 3, 25), total_questions=120,
            correct_answers=80, wrong_answers=30, empty_answers=10, net_score=72.5,
            subject_scores=_scores(
                ("Türkçe", 30.0), ("Matematik", 22.5), ("Fizik", 7.5),
                ("Kimya", 5.0), ("Biyoloji", 5.0), ("Tarih", 2.5),
            ),
        ),
        ExamResult(
            id="sample-ayt-1", name="AYT Deneme 1", exam_type=ExamType.AYT,
            date=datetime(2025, 4, 5), total_questions=160,
            correct_answers=95, wrong_answers=45, empty_answers=20, net_score=83.75,
            subject_scores=_scores(
                ("Matematik", 30.0), ("Fizik", 12.5), ("Kimya", 10.0),
                ("Biyoloji", 7.5), ("Edebiyat", 15.0), ("Tarih", 5.0),
                ("Coğrafya", 3.75),
            ),
        ),
        ExamResult(
            id="sample-ayt-2", name="AYT Deneme 2", exam_type=ExamType.AYT,
            date=datetime(2025, 3, 20), total_questions=160,
            correct_answers=90, wrong_answers=50, empty_answers=20, net_score=77.5,
            subject_scores=_scores(
                ("Matematik", 27.5), ("Fizik", 10.0), ("Kimya", 10.0),
                ("Biyoloji", 7.5), ("Edebiyat", 12.5), ("Tarih", 5.0),
                ("Coğrafya", 5.0),
            ),
        ),
        ExamResult(
            id="sample-tyt-3", name="TYT Deneme 3", exam_type=ExamType.TYT,
            date=datetime(2025, 4, 15), total_questions=120,
            correct_answers=90, wrong_answers=20, empty_answers=10, net_score=85.0,
            subject_scores=_scores(
                ("Türkçe", 35.0), ("Matematik", 27.5), ("Fizik", 8.75),
                ("Kimya", 6.25), ("Biyoloji", 5.0), ("Tarih", 2.5),
            ),
        ),
    ]
    return sorted(results, key=lambda r: r.date, reverse=True)


def seed_repository(repository: IExamResultRepository) -> int:
    """Carga los ejemplos que aún no estén en el repositorio."""
    added = 0
    for result in sample_results():
        if repository.get(result.id) is None:
            repository.add(result)
            added += 1
    return added
