"""Enumerations shared by every calculation stage."""
import enum


class RiskLevel(str, enum.Enum):
    green = "green"
    amber = "amber"
    red = "red"
    breach = "breach"  # display refinement over red; the classifier never returns it


class CalculationMode(str, enum.Enum):
    """What the caller intends (audit of past travel, or planning). No calculation reads it."""

    audit = "audit"
    planning = "planning"
