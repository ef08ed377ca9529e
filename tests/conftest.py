from __future__ import annotations

import pytest

from exampulse.domain.entities.exam_result import ExamResult
from exampulse.infrastructure.persistence.in_memory_exam_result_repository import (
    InMemoryExamResultRepository,
)
from exampulse.infrastructure.persistence.sample_data import sample_results


@pytest.fixture
def samples() -> list[ExamResult]:
    return sample_results()


@pytest.fixture
def repository(samples) -> InMemoryExamResultRepository:
    repo = InMemoryExamResultRepository()
    for result in samples:
        repo.add(result)
    return repo
