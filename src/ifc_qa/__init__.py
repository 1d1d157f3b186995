"""IFC QA: rule-based quality checks for IFC building models."""

__version__ = "0.1.0"
