"""Infrastructure layer: persistence, logging and system services."""
