"""Deterministic skill-gap analysis between a resume and a set of job descriptions."""

__version__ = "1.0.0"
