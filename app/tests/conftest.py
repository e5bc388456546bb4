import pytest

from infrastructure.i18n import create_translator
from integrations.slack.client import SlackClientManager
from tests.factories.i18n import make_messages


@pytest.fixture
def messages():
    """Fresh copy of the sample catalog, safe to mutate."""
    return make_messages()


@pytest.fixture
def bundled_translator():
    """Translator over the bundled app/locales catalogs."""
    return create_translator()


@pytest.fixture(autouse=True)
def reset_slack_client():
    """Keep the cached Slack client from leaking between tests."""
    SlackClientManager.reset()
    yield
    SlackClientManager.reset()
