"""Structured logging helpers."""
