"""Service dependency providers."""
