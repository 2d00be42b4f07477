"""Prompt building, normalization and the career assistant service."""
