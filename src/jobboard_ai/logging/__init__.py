"""Usage accounting for AI operations."""
