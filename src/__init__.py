"""Industry experience matching for candidate-to-job fit."""

__version__ = "0.1.0"
