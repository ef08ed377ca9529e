"""
ExamPulse
=========
Analítica de resultados de denemes (TYT / AYT / YDT).

Capas:
- domain/: entidades, analítica pura, catálogo de exámenes
- application/: casos de uso y DTOs
- infrastructure/: repositorio en memoria
- presentation/: API REST (FastAPI)
- shared/: settings y logging
"""

__version__ = "0.1.0"
