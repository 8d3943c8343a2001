# src/cityhall/__init__.py

"""City Hall Selfie game backend."""

__version__ = "0.1.0"
