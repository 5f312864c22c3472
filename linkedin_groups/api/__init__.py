"""Wrappers for LinkedIn REST endpoints."""
