"""
Shared fixtures: stub executables standing in for the Java engine and Graphviz.

The stub engine records its arguments and working directory inside the engine
directory, prints canned ollie output and exits with a chosen status.
"""
import stat
import sys
from pathlib import Path

import pytest

BARACK_OUTPUT = (
    "1.000: (Barack Obama; was; born)\n"
    "1.000: (Barack Obama; was born in; Hawaii)\n"
)


def _write_script(path: Path, body: str) -> Path:
    path.write_text("#!/bin/sh\n" + body, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def make_engine(tmp_path):
    """Return a factory creating a stub engine install; yields (engine_home, java_bin)."""
    if sys.platform == "win32":
        pytest.skip("stub executables are POSIX shell scripts")

    def _make(output: str = BARACK_OUTPUT, status: int = 0, stderr: str = ""):
        engine_home = tmp_path / "stanford-openie"
        engine_home.mkdir(exist_ok=True)
        (engine_home / "stub_output.txt").write_text(output, encoding="utf-8")
        (engine_home / "stub_stderr.txt").write_text(stderr, encoding="utf-8")
        java_bin = _write_script(
            tmp_path / "fake-java",
            'printf \'%s\\n\' "$@" > args.txt\n'
            "pwd > cwd.txt\n"
            "cat stub_output.txt\n"
            "cat stub_stderr.txt >&2\n"
            f"exit {status}\n",
        )
        return engine_home, java_bin

    return _make


@pytest.fixture
def engine_config(make_engine, tmp_path):
    """Config dict pointing the runner at a stub engine with Barack Obama output."""
    engine_home, java_bin = make_engine()
    return {
        "engine": {"home": str(engine_home), "java_bin": str(java_bin)},
        "workspace": {"root": str(tmp_path / "workspaces")},
    }


@pytest.fixture
def fake_dot(tmp_path):
    """Stub `dot` that copies the DOT file to the requested image path."""
    if sys.platform == "win32":
        pytest.skip("stub executables are POSIX shell scripts")
    # invoked as: dot -T<fmt> <dot_path> -o <image_path>
    return _write_script(tmp_path / "fake-dot", 'cp "$2" "$4"\n')


@pytest.fixture
def failing_dot(tmp_path):
    if sys.platform == "win32":
        pytest.skip("stub executables are POSIX shell scripts")
    return _write_script(tmp_path / "broken-dot", 'echo "syntax error in line 1" >&2\nexit 1\n')
