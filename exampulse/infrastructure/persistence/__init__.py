"""Persistencia en memoria (vida del proceso)."""
from exampulse.infrastructure.persistence.in_memory_exam_result_repository import (
    InMemoryExamResultRepository,
)
from exampulse.infrastructure.persistence.sample_data import sample_results, seed_repository

__all__ = ["InMemoryExamResultRepository", "sample_results", "seed_repository"]
