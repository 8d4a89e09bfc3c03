"""Flask frontend: JSON API and a small demo page over a trained PredictionEngine."""
from .web import app, set_engine, main

__all__ = ["app", "set_engine", "main"]
