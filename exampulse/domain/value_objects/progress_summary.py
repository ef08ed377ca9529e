"""
ExamPulse - Progress Summary (Value Object)
=============================================
Foto inmutable del progreso del estudiante sobre un conjunto de
denemes ya filtrado por categoría y rango temporal.

Es un VALUE OBJECT puro: no tiene identidad, no muta y no tiene
logica de negocio. Si llega un nuevo resultado se calcula un
ProgressSummary NUEVO.

SIN DATOS:
  Un conjunto vacio produce el resumen por defecto (todo en cero,
  materias vacias). No es un error. Quien necesite distinguir
  "sin datos" de "mejora cero" debe mirar test_count / has_data.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProgressSummary:
    """
    Resumen de progreso.

    Atributos:
    ----------
    average_net_score : float
        Media de net_score de los denemes considerados.

    average_percentage : float
        Media de score_percentage (net / total * 100).

    best_subject / best_subject_score : str / float
        Materia con mayor promedio. "" y 0.0 si no hay materias.

    worst_subject / worst_subject_score : str / float
        Materia con menor promedio. "" y 0.0 si no hay materias.

    improvement : float
        Puntos porcentuales entre el deneme mas reciente y el mas
        antiguo: pct(ultimo) - pct(primero). 0.0 con menos de 2.

    test_count : int
        Cantidad de denemes considerados.
    """

    average_net_score: float = 0.0
    average_percentage: float = 0.0
    best_subject: str = ""
    best_subject_score: float = 0.0
    worst_subject: str = ""
    worst_subject_score: float = 0.0
    improvement: float = 0.0
    test_count: int = 0

    @property
    def has_data(self) -> bool:
        return self.test_count > 0

    def to_dict(self) -> dict:
        """Serializacion para API REST."""
        return {
            "average_net_score": round(self.average_net_score, 2),
            "average_percentage": round(self.average_percentage, 2),
            "best_subject": self.best_subject,
            "best_subject_score": round(self.best_subject_score, 2),
            "worst_subject": self.worst_subject,
            "worst_subject_score": round(self.worst_subject_score, 2),
            "improvement": round(self.improvement, 2),
            "test_count": self.test_count,
            "has_data": self.has_data,
        }
