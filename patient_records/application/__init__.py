"""Application layer: use-case services, validators and DTOs."""
