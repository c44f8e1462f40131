"""TuQang: geometric shape validator with AI builder's advice."""

__version__ = "0.1.0"
