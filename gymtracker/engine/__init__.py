"""Derived figures over gym class records."""

from gymtracker.engine.summary import ClassSummary, summarize_classes, parse_month

__all__ = [
    "ClassSummary",
    "summarize_classes",
    "parse_month",
]
