"""Core infrastructure: logging and configuration."""
