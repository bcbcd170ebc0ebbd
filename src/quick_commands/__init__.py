"""Quick Command Buttons - configuration export/import engine."""

__version__ = "1.0.0"
