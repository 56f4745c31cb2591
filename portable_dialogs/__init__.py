"""File, message and notification dialogs shown through desktop helper programs."""

__version__ = "1.0.0"
__all__ = ["commands", "dialogs", "executor", "options", "paths", "quoting", "settings"]