"""
ExamPulse – Infrastructure Layer
==================================
Implementaciones concretas de las interfaces del dominio.

Este módulo contiene:
- persistence/: Repositorio en memoria y datos de ejemplo
"""
