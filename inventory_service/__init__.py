"""Inventory service: register, list, search, update and delete inventory records with photos."""

__version__ = "1.0.0"
