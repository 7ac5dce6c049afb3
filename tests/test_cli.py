import json
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from forvomcp.cli import app
from forvomcp.operations import Operation

runner = CliRunner()


@pytest.fixture
def mock_forvo():
    with patch("forvomcp.cli.ForvoClient") as client_cls:
        instance = client_cls.return_value
        instance.__aenter__ = AsyncMock(return_value=instance)
        instance.__aexit__ = AsyncMock(return_value=None)
        instance.call = AsyncMock(return_value={"items": [{"word": "apple"}]})
        yield client_cls


def test_cli_prints_json(mock_forvo):
    result = runner.invoke(app, ["word-pronunciations", "--params", '{"word": "apple"}', "--key", "k"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"items": [{"word": "apple"}]}
    mock_forvo.return_value.call.assert_awaited_once_with(Operation.WORD_PRONUNCIATIONS, {"word": "apple"})


def test_cli_saves_output(mock_forvo, tmp_path):
    output = tmp_path / "languages.json"

    result = runner.invoke(app, ["language-list", "--key", "k", "-o", str(output)])

    assert result.exit_code == 0
    assert json.loads(output.read_text(encoding="utf-8")) == {"items": [{"word": "apple"}]}


def test_cli_unknown_operation(mock_forvo):
    result = runner.invoke(app, ["pronounce", "--key", "k"])

    assert result.exit_code == 1
    mock_forvo.assert_not_called()


def test_cli_requires_key(mock_forvo):
    with patch("forvomcp.cli.settings") as mock_settings:
        mock_settings.api_key = None
        mock_settings.log_json = False
        mock_settings.log_level = "INFO"
        result = runner.invoke(app, ["language-list"])

    assert result.exit_code == 1
    mock_forvo.assert_not_called()


def test_cli_reports_call_errors(mock_forvo):
    mock_forvo.return_value.call.side_effect = ValueError("word is a required parameter")

    result = runner.invoke(app, ["word-pronunciations", "--key", "k"])

    assert result.exit_code == 1


def test_cli_error_hides_api_key(mock_forvo):
    mock_forvo.return_value.call.side_effect = RuntimeError(
        "Client error '400 Bad Request' for url 'https://apifree.forvo.com/key/k3y/format/json/action/language-list'"
    )

    result = runner.invoke(app, ["language-list", "--key", "k3y"])

    assert result.exit_code == 1
    assert "k3y" not in result.output
    assert "/key/***/" in result.output
