"""Turbojet cycle model, bracketed Newton-Raphson solver and a sample duct-flow command."""

__version__ = "0.1.0"
__all__ = ["roots", "jet_calc", "cli"]