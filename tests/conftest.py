import pytest

from agentic_search.config.settings import Settings, get_settings
from agentic_search.llm.models import ModelSettings
from agentic_search.tools.search.config import SearchToolConfig

SEARCH_ENV_VARS = ("GOOGLE_SEARCH_API_KEY", "GOOGLE_SEARCH_CX", "GOOGLE_SEARCH_BASE_URL")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """
    Ensure each test starts with a fresh Settings() object.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def no_search_env(monkeypatch):
    for name in SEARCH_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        GOOGLE_SEARCH_API_KEY="test-key",
        GOOGLE_SEARCH_CX="test-cx",
        GOOGLE_SEARCH_BASE_URL="https://search.test/customsearch/v1",
        OPENAI_API_KEY="sk-test",
    )


@pytest.fixture
def model_settings():
    return ModelSettings(provider="openai", model="gpt-4o-mini")


@pytest.fixture
def search_config(settings, model_settings):
    return SearchToolConfig.from_settings(settings, model_settings, "Plan a trip")
