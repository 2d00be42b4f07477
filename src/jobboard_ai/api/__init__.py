"""HTTP layer for the AI endpoints."""
