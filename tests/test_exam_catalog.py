from __future__ import annotations

from datetime import datetime

import pytest

from exampulse.domain.entities.exam_result import ExamType
from exampulse.domain.exceptions.domain_errors import ValidationError
from exampulse.domain.services.exam_catalog import (
    SubjectAnswers,
    build_exam_result,
    compute_net,
    question_limits,
    subjects_for,
    total_questions,
)


@pytest.mark.parametrize("exam_type,total", [
    (ExamType.TYT, 120),
    (ExamType.AYT, 160),
    (ExamType.YDT, 80),
])
def test_total_questions(exam_type, total):
    assert total_questions(exam_type) == total
    assert sum(question_limits(exam_type).values()) == total


def test_subjects_keep_form_order():
    assert subjects_for("TYT")[:2] == ["Türkçe", "Matematik"]
    assert subjects_for(ExamType.AYT)[0] == "Türk Dili ve Edebiyatı"


def test_question_limits_returns_a_copy():
    limits = question_limits(ExamType.TYT)
    limits["Türkçe"] = 0
    assert question_limits(ExamType.TYT)["Türkçe"] == 40


def test_net_penalises_a_quarter_per_wrong_answer():
    assert compute_net(30, 8) == 28.0
    assert compute_net(0, 3) == -0.75
    assert compute_net(10, 0) == 10.0


def test_build_result_from_answer_sheet():
    result = build_exam_result(
        name="TYT Deneme 4",
        exam_type=ExamType.TYT,
        date=datetime(2025, 5, 1),
        answers={
            "Türkçe": SubjectAnswers(correct=35, wrong=4, empty=1),
            "Matematik": SubjectAnswers(correct=30, wrong=8, empty=2),
        },
    )

    assert result.total_questions == 120
    assert (result.correct_answers, result.wrong_answers, result.empty_answers) == (65, 12, 3)
    assert result.net_score == pytest.approx(62.0)
    assert [s.subject for s in result.subject_scores] == subjects_for(ExamType.TYT)
    assert result.score_for("Matematik").score == pytest.approx(28.0)
    assert result.score_for("Fizik").score == 0.0


def test_counts_are_clamped_to_subject_limit():
    result = build_exam_result(
        "Fizik", "TYT", datetime(2025, 5, 1),
        {"Fizik": SubjectAnswers(correct=10, wrong=-2)},
    )
    assert result.score_for("Fizik").score == 7.0
    assert result.correct_answers == 7
    assert result.wrong_answers == 0


def test_more_answers_than_questions_is_rejected():
    with pytest.raises(ValidationError) as exc:
        build_exam_result(
            "x", ExamType.TYT, datetime(2025, 5, 1),
            {"Fizik": SubjectAnswers(correct=5, wrong=3)},
        )
    assert exc.value.field == "Fizik"


def test_unknown_subject_is_rejected():
    with pytest.raises(ValidationError):
        build_exam_result(
            "x", ExamType.YDT, datetime(2025, 5, 1),
            {"Matematik": SubjectAnswers(correct=1)},
        )


def test_blank_name_gets_default():
    result = build_exam_result("  ", ExamType.AYT, datetime(2025, 5, 1), {})
    assert result.name == "Yeni Deneme"
    assert result.net_score == 0.0
    assert result.total_questions == 160
