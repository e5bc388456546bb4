from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import get_limiter
from infrastructure.services.providers import get_slackin_service, get_translator
from main import server_app
from modules.slackin.service import SlackinService
from tests.factories.slack import make_slack_member, make_users_list_response


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty rate limit counters."""
    get_limiter().reset()
    yield
    get_limiter().reset()


@pytest.fixture
def slack_client():
    """Slack WebClient double with two of three members online."""
    client = MagicMock()
    client.users_list.return_value = make_users_list_response(
        [
            make_slack_member("U1", presence="active"),
            make_slack_member("U2", presence="active"),
            make_slack_member("U3", presence="away"),
        ]
    )
    client.api_call.return_value = {"ok": True}
    return client


@pytest.fixture
def slackin_service(slack_client, bundled_translator):
    return SlackinService(
        slack_client, bundled_translator, team_name="Acme", invite_channels=["C001"]
    )


@pytest.fixture
def test_app(slackin_service, bundled_translator):
    """Test client for the app with Slack and catalogs overridden."""
    server_app.dependency_overrides[get_slackin_service] = lambda: slackin_service
    server_app.dependency_overrides[get_translator] = lambda: bundled_translator
    yield TestClient(server_app)
    server_app.dependency_overrides.clear()
