"""Reconciliation service wiring."""

from .reconciler import Reconciler

__all__ = ["Reconciler"]
