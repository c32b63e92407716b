"""Validation outcomes."""

from comelint.results.models import ACCEPTED, Rejection, RejectionKind, ValidationOutcome

__all__ = ["ACCEPTED", "Rejection", "RejectionKind", "ValidationOutcome"]
