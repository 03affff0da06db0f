"""Month-by-month simulation of finances while paying off a house loan."""

__version__ = "0.1.0"
__all__ = ["calculation", "model", "formatting", "scenario", "report", "cli"]