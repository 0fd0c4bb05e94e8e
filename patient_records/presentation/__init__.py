"""Presentation layer: REST and gRPC adapters."""
