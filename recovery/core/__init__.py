"""Core utilities shared by every layer (config, result types, errors)."""
