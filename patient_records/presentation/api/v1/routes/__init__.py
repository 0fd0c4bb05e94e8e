"""Version 1 route modules."""
