"""Diagnostic trace module."""

from .trace import DEFAULT_CAPACITY, DiagnosticTrace, IDiagnosticTrace

__all__ = ["DEFAULT_CAPACITY", "DiagnosticTrace", "IDiagnosticTrace"]
