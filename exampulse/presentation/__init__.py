"""
ExamPulse – Presentation Layer
================================
Adaptadores de entrada: API REST (FastAPI).
"""
