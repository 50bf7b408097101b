from unittest.mock import patch

import pytest

from shell_translator import cli
from shell_translator.command_validator import ValidationReason
from shell_translator.errors import (
    ConfigurationError,
    InputRejected,
    TranslationAmbiguous,
    TransportError,
    UpstreamError,
    ValidationFailed,
)


@pytest.fixture(autouse=True)
def quiet_env(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("SHELL_TRANSLATOR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SHELL_TRANSLATOR_TIMEOUT", raising=False)
    with patch("shell_translator.config.load_dotenv"):
        yield


class TestDescribeError:
    def test_each_kind_has_its_own_message(self):
        messages = {
            cli.describe_error(InputRejected()),
            cli.describe_error(TranslationAmbiguous()),
            cli.describe_error(ValidationFailed(candidate="banana", reason=ValidationReason.NOT_EXECUTABLE)),
            cli.describe_error(TransportError()),
            cli.describe_error(UpstreamError(500, "oops")),
            cli.describe_error(ConfigurationError()),
        }
        assert len(messages) == 6

    def test_timeout_message(self):
        assert "timed out" in cli.describe_error(TransportError("whatever text"))

    def test_validation_names_candidate(self):
        assert "banana" in cli.describe_error(ValidationFailed(candidate="banana"))


class TestMain:
    def test_one_shot_translation(self, capsys):
        assert cli.main(["list", "files"]) == 0
        assert "ls" in capsys.readouterr().out

    def test_one_shot_rejection(self, capsys):
        assert cli.main(["aaaaaa"]) == 1
        assert "don't understand" in capsys.readouterr().out

    def test_interactive_loop(self, capsys):
        with patch("builtins.input", side_effect=["go home", "", "exit"]):
            assert cli.main([]) == 0
        out = capsys.readouterr().out
        assert "cd ~" in out
