"""Shared utilities: logging setup, environment access and decorators."""
