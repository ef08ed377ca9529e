from __future__ import annotations

from datetime import datetime

from exampulse.domain.entities.exam_result import ExamResult, ExamType, SubjectScore


def make_result(
    date: datetime,
    net: float = 50.0,
    total: int = 100,
    exam_type: ExamType = ExamType.TYT,
    scores: dict[str, float] | None = None,
    result_id: str | None = None,
) -> ExamResult:
    return ExamResult(
        id=result_id or ExamResult.generate_id(),
        name=f"Deneme {date:%d.%m}",
        exam_type=exam_type,
        date=date,
        total_questions=total,
        correct_answers=0,
        wrong_answers=0,
        empty_answers=0,
        net_score=net,
        subject_scores=tuple(
            SubjectScore(subject=s, score=v) for s, v in (scores or {}).items()
        ),
    )
