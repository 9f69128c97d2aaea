"""API tests for application startup and shutdown logging."""

from unittest.mock import call, patch

import pytest
from fastapi.testclient import TestClient

from src.core.config import settings
from src.domain.coded_enums import get_statistics
from src.domain.enums import CourseType
from src.main import app


@pytest.fixture
def lifespan_logger():
    """Run the app's lifespan once with get_logger patched; yield the mock."""
    with patch("src.main.get_logger") as mock_get_logger:
        with TestClient(app) as client:
            assert client.get("/health").status_code == 200
        yield mock_get_logger.return_value


@pytest.mark.api
class TestAppLifespan:
    """Test the registry summary logged by the lifespan handler."""

    def test_each_coded_enum_logged_at_debug(self, lifespan_logger):
        assert (
            call(
                "Coded enum registered",
                enum_type="CourseType",
                variants=4,
                description="102:PICTURE; 103:AUDIO; 104:VIDEO; 105:URL",
            )
            in lifespan_logger.debug.call_args_list
        )

    def test_debug_call_per_registered_enum(self, lifespan_logger):
        logged = {c.kwargs["enum_type"] for c in lifespan_logger.debug.call_args_list}

        assert CourseType.__name__ in logged
        assert len(lifespan_logger.debug.call_args_list) == get_statistics()["total_types"]

    def test_startup_logged_with_statistics(self, lifespan_logger):
        started = lifespan_logger.info.call_args_list[0]

        assert started.args == ("Application started",)
        assert started.kwargs == {
            "environment": settings.environment.value,
            "version": settings.app_version,
            **get_statistics(),
        }
        assert started.kwargs["total_types"] >= 1
        assert started.kwargs["total_variants"] >= 4

    def test_shutdown_logged_last(self, lifespan_logger):
        assert lifespan_logger.info.call_args_list[-1] == call("Application stopped")
        assert lifespan_logger.info.call_count == 2
