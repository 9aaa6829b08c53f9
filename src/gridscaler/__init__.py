"""Selenium Grid demand scaler."""

__version__ = "0.1.0"
