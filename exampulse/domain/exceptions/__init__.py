"""Domain exceptions."""
from exampulse.domain.exceptions.domain_errors import (
    DomainError,
    ValidationError,
    InvalidExamResultError,
    ExamResultNotFoundError,
    DuplicateExamResultError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "InvalidExamResultError",
    "ExamResultNotFoundError",
    "DuplicateExamResultError",
]
