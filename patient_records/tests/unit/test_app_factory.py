"""Tests for application construction and lifespan."""

from unittest.mock import patch

import pytest

from patient_records.app_factory import create_application, lifespan


def test_routes_are_mounted(test_settings) -> None:
    app = create_application(settings_override=test_settings)
    paths = app.openapi()["paths"]

    assert set(paths["/api/v1/patients"]) == {"get", "post"}
    assert "get" in paths["/api/v1/patients/{patient_id}"]
    assert {"/health/live", "/health/ready"} <= set(paths)


def test_sentry_initialized_only_with_dsn(test_settings) -> None:
    with patch("patient_records.app_factory.sentry_sdk.init") as sentry_init:
        create_application(settings_override=test_settings)
        sentry_init.assert_not_called()

        settings = test_settings.model_copy(
            update={"SENTRY_DSN": "https://public@o0.ingest.sentry.io/0"}
        )
        create_application(settings_override=settings)
        sentry_init.assert_called_once()


@pytest.mark.asyncio
async def test_lifespan_sets_up_and_tears_down(test_settings) -> None:
    settings = test_settings.model_copy(
        update={"GRPC_ENABLED": True, "GRPC_HOST": "127.0.0.1", "GRPC_PORT": 0}
    )
    app = create_application(settings_override=settings)

    async with lifespan(app):
        assert app.state.session_factory is not None
        assert app.state.grpc_port > 0

    assert app.state.session_factory is None
