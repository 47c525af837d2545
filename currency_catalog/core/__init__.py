"""Catalog core: records, lookup, formatting, configuration and errors."""
