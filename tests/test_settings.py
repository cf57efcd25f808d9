from agentic_search.config.settings import Settings, get_settings


def test_settings_read_search_credentials(monkeypatch):
    monkeypatch.setenv("GOOGLE_SEARCH_API_KEY", "env-key")
    monkeypatch.setenv("GOOGLE_SEARCH_CX", "env-cx")

    settings = get_settings()

    assert settings.google_search_api_key == "env-key"
    assert settings.google_search_cx == "env-cx"


def test_settings_defaults(no_search_env, monkeypatch):
    for name in ("LLM_PROVIDER", "OPENAI_MODEL", "DEFAULT_API_TIMEOUT_SECONDS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.google_search_api_key == ""
    assert settings.google_search_base_url == "https://www.googleapis.com/customsearch/v1"
    assert settings.llm_provider == "openai"
    assert settings.openai_model == "gpt-4o-mini"
    assert settings.default_api_timeout_seconds == 20
    assert settings.log_level == "INFO"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
