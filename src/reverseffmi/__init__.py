"""Reverse FFMI calculator: target weight from height, body fat and normalized FFMI."""

__version__ = "0.1.0"
