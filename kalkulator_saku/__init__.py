"""Kalkulator Saku package: display buffers, expression builder, and calculator state machine."""

from .logging_config import configure_from_env

configure_from_env()

__all__ = [
    "config",
    "types",
    "logging_config",
    "formatter",
    "evaluator",
    "display",
    "expression",
    "state",
    "calculator",
]
