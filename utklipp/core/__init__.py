"""Core types, errors and paths shared across utklipp."""
