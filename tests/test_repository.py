from __future__ import annotations

from datetime import datetime, timezone

import pytest

from exampulse.domain.exceptions.domain_errors import DuplicateExamResultError
from exampulse.infrastructure.persistence.in_memory_exam_result_repository import (
    InMemoryExamResultRepository,
)
from exampulse.infrastructure.persistence.sample_data import seed_repository

from tests.factories import make_result


def test_results_are_kept_newest_first(repository):
    dates = [r.date for r in repository.list_all()]
    assert dates == sorted(dates, reverse=True)

    newest = make_result(datetime(2025, 6, 1))
    oldest = make_result(datetime(2024, 12, 1))
    repository.add(newest)
    repository.add(oldest)

    listed = repository.list_all()
    assert listed[0] is newest
    assert listed[-1] is oldest


def test_same_day_results_keep_insertion_order():
    repo = InMemoryExamResultRepository()
    first = make_result(datetime(2025, 3, 1), result_id="a")
    second = make_result(datetime(2025, 3, 1), result_id="b")
    repo.add(first)
    repo.add(second)
    assert [r.id for r in repo.list_all()] == ["a", "b"]


def test_duplicate_id_is_rejected(repository, samples):
    with pytest.raises(DuplicateExamResultError):
        repository.add(samples[0])
    assert repository.count() == 5


def test_get_by_id(repository):
    assert repository.get("sample-ayt-1").name == "AYT Deneme 1"
    assert repository.get("missing") is None


def test_list_all_returns_a_copy(repository):
    repository.list_all().clear()
    assert repository.count() == 5


def test_capacity_drops_oldest():
    repo = InMemoryExamResultRepository(max_results=2)
    for day in (1, 3, 2):
        repo.add(make_result(datetime(2025, 3, day), result_id=f"d{day}"))

    assert [r.id for r in repo.list_all()] == ["d3", "d2"]
    assert repo.get("d1") is None


def test_seed_is_idempotent():
    repo = InMemoryExamResultRepository()
    assert seed_repository(repo) == 5
    assert seed_repository(repo) == 0
    assert repo.count() == 5

    repo.clear()
    assert repo.count() == 0
    assert repo.list_all() == []


def test_aware_and_naive_results_sort_together():
    repo = InMemoryExamResultRepository()
    repo.add(make_result(datetime(2025, 5, 1, 9, 0), result_id="naive"))
    repo.add(make_result(datetime(2025, 5, 1, 10, 0, tzinfo=timezone.utc), result_id="aware"))

    assert [r.id for r in repo.list_all()] == ["aware", "naive"]
    assert repo.get("aware").date == datetime(2025, 5, 1, 10, 0)


def test_failed_add_leaves_store_unchanged(repository):
    broken = make_result(datetime(2025, 5, 1), result_id="broken")
    object.__setattr__(broken, "date", None)  # no comparable con datetime
    before = repository.list_all()

    with pytest.raises(TypeError):
        repository.add(broken)

    assert repository.count() == 5
    assert repository.list_all() == before
    assert repository.get("broken") is None

    newest = make_result(datetime(2025, 6, 1), result_id="after")
    repository.add(newest)
    assert repository.list_all()[0] is newest
