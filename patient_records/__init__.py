"""
Patient records service.

REST and gRPC surfaces over a validated create/read flow for patients,
backed by an async SQLAlchemy unit of work.
"""

__version__ = "1.0.0"
