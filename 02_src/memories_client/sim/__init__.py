"""Smoke scenario."""

from .sim import ISim, Sim

__all__ = ["ISim", "Sim"]
