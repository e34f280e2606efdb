"""Persistence: inventory stores (json file, sql table) and the store factory."""
