import stat

import pytest


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


def make_executable(directory, name):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def bin_dir(tmp_path):
    """A PATH directory holding a few fake executables and one plain file."""
    directory = tmp_path / "bin"
    directory.mkdir()
    for name in ("ls", "rm", "mkdir", "tool"):
        make_executable(directory, name)
    plain = directory / "plain"
    plain.write_text("not a program\n")
    plain.chmod(0o644)
    (directory / "adir").mkdir()
    return directory


