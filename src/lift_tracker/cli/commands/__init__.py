"""Command modules register themselves on the shared Typer app at import time."""
