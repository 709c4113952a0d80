"""lift-tracker: strength-training log with session progression and 1RM estimates."""

__version__ = "0.1.0"
