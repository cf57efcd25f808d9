from unittest.mock import AsyncMock, patch

from agentic_search import main as cli
from agentic_search.config.settings import Settings


def test_main_prints_tool_output(settings, capsys):
    with patch.object(cli, "get_settings", return_value=settings), patch.object(
        cli.GoogleSearch, "execute", new_callable=AsyncMock, return_value="Desc A"
    ) as execute:
        exit_code = cli.main(["what is a", "--goal", "learn"])

    assert exit_code == 0
    assert capsys.readouterr().out == "Desc A\n"
    execute.assert_awaited_once_with("what is a")


def test_main_applies_provider_override(settings):
    seen = {}

    class RecordingSearch:
        def __init__(self, config):
            seen["config"] = config

        async def execute(self, query):
            return "ok"

    with patch.object(cli, "get_settings", return_value=settings), patch.object(
        cli, "GoogleSearch", RecordingSearch
    ):
        cli.main(["q", "--provider", "gemini", "--goal", "g"])

    config = seen["config"]
    assert config.goal == "g"
    assert config.model_settings.provider == "gemini"
    assert config.model_settings.model == settings.gemini_model


def test_main_reports_missing_credentials(capsys):
    settings = Settings(_env_file=None, GOOGLE_SEARCH_API_KEY="", GOOGLE_SEARCH_CX="")

    with patch.object(cli, "get_settings", return_value=settings):
        exit_code = cli.main(["q"])

    assert exit_code == 2
    assert "GOOGLE_SEARCH_API_KEY" in capsys.readouterr().err
