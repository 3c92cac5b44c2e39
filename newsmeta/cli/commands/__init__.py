"""Command modules for the modular CLI (loaded on demand)."""
