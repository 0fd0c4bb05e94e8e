"""gRPC adapter for the patient service."""
