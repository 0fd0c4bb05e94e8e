"""
Main entry point for the patient records service.

Serves the REST API with uvicorn; the gRPC server runs alongside it inside
the application lifespan.
"""

import uvicorn

from patient_records.app_factory import create_application
from patient_records.core.config.settings import get_settings
from patient_records.core.logging_config import LOGGING_CONFIG

app = create_application()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "patient_records.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        workers=settings.UVICORN_WORKERS,
        log_config=LOGGING_CONFIG,
    )


if __name__ == "__main__":
    run()
