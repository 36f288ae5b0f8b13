"""Application layer - orchestrates business operations."""
