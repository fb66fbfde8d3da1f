"""Reporting-lines: rebuild an org tree from a flat employee table and rank by reach."""

__version__ = "0.1.0"
