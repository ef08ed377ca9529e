from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from exampulse.domain.entities.exam_result import ExamResult, ExamType, SubjectScore
from exampulse.domain.exceptions.domain_errors import InvalidExamResultError, ValidationError

from tests.factories import make_result


def _result(**overrides) -> ExamResult:
    fields = dict(
        id="r1", name="TYT Deneme", exam_type=ExamType.TYT, date=datetime(2025, 4, 10),
        total_questions=120, correct_answers=85, wrong_answers=25, empty_answers=10,
        net_score=78.75,
    )
    fields.update(overrides)
    return ExamResult(**fields)


def test_score_percentage_is_computed():
    assert _result().score_percentage == pytest.approx(78.75 / 120 * 100)


def test_subject_scores_become_a_tuple():
    result = _result(subject_scores=[SubjectScore("Türkçe", 32.5)])
    assert result.subject_scores == (SubjectScore("Türkçe", 32.5),)


def test_result_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        _result().net_score = 90.0


@pytest.mark.parametrize("overrides", [
    {"total_questions": 0},
    {"correct_answers": -1},
    {"wrong_answers": -3},
    {"correct_answers": 100, "wrong_answers": 20, "empty_answers": 1},
])
def test_invariants_are_enforced(overrides):
    with pytest.raises(InvalidExamResultError) as exc:
        _result(**overrides)
    assert isinstance(exc.value, ValidationError)
    assert exc.value.to_dict()["error"] == "INVALID_EXAM_RESULT"


def test_score_for_missing_subject():
    result = make_result(datetime(2025, 1, 1), scores={"Fizik": 3.0})
    assert result.score_for("Kimya") is None
    assert result.score_for("Fizik").score == 3.0


def test_to_dict_rounds_and_serialises():
    data = _result(subject_scores=(SubjectScore("Kimya", 6.25),)).to_dict()
    assert data["exam_type"] == "TYT"
    assert data["date"] == "2025-04-10T00:00:00"
    assert data["score_percentage"] == pytest.approx(65.62, abs=0.01)
    assert data["subject_scores"] == [{"subject": "Kimya", "score": 6.25}]


def test_aware_date_is_stored_as_naive_utc():
    istanbul = timezone(timedelta(hours=3))
    result = _result(date=datetime(2025, 4, 10, 13, 0, tzinfo=istanbul))
    assert result.date == datetime(2025, 4, 10, 10, 0)
    assert result.date.tzinfo is None


def test_naive_date_is_kept_as_is():
    assert _result(date=datetime(2025, 4, 10, 13, 0)).date == datetime(2025, 4, 10, 13, 0)
