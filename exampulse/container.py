"""
Dependency Injection Container.

Este módulo proporciona el contenedor de inyección de dependencias
que gestiona el repositorio y los casos de uso.

Clean Architecture: Este contenedor vive en la capa más externa y es el único
lugar donde se crean dependencias concretas.
"""

from dataclasses import dataclass, field
from typing import Optional

from exampulse.domain.repositories.exam_result_repository import IExamResultRepository
from exampulse.shared.config.settings import Settings


@dataclass
class Container:
    """
    Contenedor de Inyección de Dependencias.

    El repositorio es singleton (es el estado de la app); los casos de
    uso se crean en cada llamada porque no guardan estado propio.
    """

    # Configuración
    settings: Settings = field(default_factory=Settings)

    # Repositorios (implementaciones concretas)
    _exam_result_repository: Optional[IExamResultRepository] = None

    # ==================== Repositories ====================

    @property
    def exam_result_repository(self) -> IExamResultRepository:
        """Obtiene o crea el repositorio de resultados (singleton)."""
        if self._exam_result_repository is None:
            from exampulse.infrastructure.persistence.in_memory_exam_result_repository import (
                InMemoryExamResultRepository,
            )
            self._exam_result_repository = InMemoryExamResultRepository(
                max_results=self.settings.max_results,
            )
        return self._exam_result_repository

    # ==================== Use Cases ====================

    def get_record_exam_result_usecase(self):
        """Factory para RecordExamResultUseCase."""
        from exampulse.application.use_cases.record_exam_result_usecase import RecordExamResultUseCase
        return RecordExamResultUseCase(repository=self.exam_result_repository)

    def get_exam_analytics_usecase(self):
        """Factory para ExamAnalyticsUseCase con los defaults de settings."""
        from exampulse.application.use_cases.exam_analytics_usecase import ExamAnalyticsUseCase
        return ExamAnalyticsUseCase(
            repository=self.exam_result_repository,
            default_time_range=self.settings.default_time_range,
            averaging=self.settings.subject_averaging,
            trend_threshold=self.settings.trend_threshold,
        )

    # ==================== Lifecycle ====================

    def reset(self) -> None:
        """Resetea todas las instancias (útil para tests)."""
        self._exam_result_repository = None

    def override(self, name: str, instance) -> None:
        """
        Override una dependencia (útil para tests con mocks).

        Args:
            name: Nombre de la dependencia (ej: 'exam_result_repository')
            instance: Instancia mock a usar
        """
        attr_name = f"_{name}"
        if hasattr(self, attr_name):
            setattr(self, attr_name, instance)
        else:
            raise ValueError(f"Unknown dependency: {name}")


# ==================== Global Container ====================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Obtiene la instancia global del contenedor.

    Patrón Singleton para asegurar una única instancia
    compartida en toda la aplicación.
    """
    global _container
    if _container is None:
        _container = Container()
    return _container


def init_container(settings: Optional[Settings] = None) -> Container:
    """Crea (o recrea) el contenedor global con los settings dados."""
    global _container
    _container = Container(settings=settings or Settings())
    return _container


def reset_container() -> None:
    """Descarta el contenedor global (el próximo get_container crea uno nuevo)."""
    global _container
    if _container is not None:
        _container.reset()
    _container = None
