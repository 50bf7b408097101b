import os

import pytest

from shell_translator.command_validator import (
    CommandValidator,
    ValidationReason,
    strip_code_fences,
)


requires_permission_bits = pytest.mark.skipif(
    os.name == "nt", reason="permission bits are not checked on Windows"
)


@pytest.fixture
def validator(bin_dir):
    return CommandValidator(path=str(bin_dir))


class TestCodeFences:
    def test_bash_fence(self):
        assert strip_code_fences("```bash\nls -la\n```") == "ls -la"

    def test_plain_fence(self):
        assert strip_code_fences("```ls```") == "ls"

    def test_no_fence(self):
        assert strip_code_fences("  mkdir test ") == "mkdir test"


class TestPathSearch:
    def test_executable_on_path(self, validator):
        assert validator.looks_valid("tool --flag value")
        assert validator.looks_valid('rm -r "my folder"')

    def test_unknown_program(self, validator):
        outcome = validator.check("banana")
        assert not outcome.valid
        assert outcome.reason is ValidationReason.NOT_EXECUTABLE

    @requires_permission_bits
    def test_file_without_execute_bit(self, validator):
        assert not validator.looks_valid("plain")

    def test_directory_is_not_a_program(self, validator):
        assert not validator.looks_valid("adir")

    def test_directories_searched_in_order(self, bin_dir, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()
        validator = CommandValidator(path=os.pathsep.join(["", str(empty), str(bin_dir)]))
        assert validator.find_executable("tool") == str(bin_dir / "tool")

    def test_live_path_used_by_default(self, bin_dir, monkeypatch):
        monkeypatch.setenv("PATH", str(bin_dir))
        assert CommandValidator().looks_valid("tool")
        monkeypatch.setenv("PATH", "")
        assert not CommandValidator().looks_valid("tool")

    def test_fenced_candidate(self, validator):
        assert validator.looks_valid("```bash\ntool x\n```")


class TestLeadingToken:
    @pytest.mark.parametrize("candidate", ["", "   ", "```\n```"])
    def test_empty(self, validator, candidate):
        assert validator.check(candidate).reason is ValidationReason.EMPTY

    def test_flag_first(self, validator):
        outcome = validator.check("-rf /")
        assert not outcome
        assert outcome.reason is ValidationReason.LEADING_DASH

    @pytest.mark.parametrize("candidate", ["cd ..", "cursor .", "code .", "xdg-open ."])
    def test_builtins_skip_path_search(self, candidate):
        assert CommandValidator(path="").looks_valid(candidate)


class TestExplicitPaths:
    def test_executable_path(self, validator, bin_dir):
        assert validator.looks_valid(f"{bin_dir / 'tool'} --help")

    @requires_permission_bits
    def test_non_executable_path(self, validator, bin_dir):
        assert not validator.looks_valid(str(bin_dir / "plain"))

    def test_directory_path(self, validator, bin_dir):
        assert not validator.looks_valid(str(bin_dir / "adir"))

    def test_missing_path(self, validator, bin_dir):
        assert not validator.looks_valid(str(bin_dir / "missing"))


def test_repeated_checks_agree(validator):
    for candidate in ("tool", "banana", "-x", "cd /tmp", ""):
        assert validator.looks_valid(candidate) == validator.looks_valid(candidate)
