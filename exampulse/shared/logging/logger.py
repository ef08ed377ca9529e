"""
ExamPulse – Logging configuration
===================================
Logging legible en consola para la API y los casos de uso.

Qué se registra:
  exampulse.main                  arranque/parada y carga de ejemplos
  exampulse.usecase.record_result cada deneme registrado (id, tipo, net)
  exampulse.usecase.analytics     consultas de progreso e insights (DEBUG)
  exampulse.persistence.memory    resultados descartados por capacidad
  exampulse.api.routes            errores de dominio devueltos como HTTP

Todos cuelgan del namespace "exampulse." para ajustar su nivel en
bloque (EXAMPULSE_LOG_LEVEL).
"""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int | str = logging.INFO) -> None:
    """Configura el root logger una sola vez al arranque."""
    fmt = (
        "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s"
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger()
    # Evitar handlers duplicados si se llama más de una vez
    if not root.handlers:
        root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Fábrica de loggers con namespace prefijado."""
    return logging.getLogger(f"exampulse.{name}")
