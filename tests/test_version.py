"""Tests for build info and the --version flag."""

from hscroll import version
from hscroll.__main__ import main
from hscroll.version import BuildInfo


def test_version_string_from_git(monkeypatch):
    monkeypatch.setattr(version, "_from_git_repo",
                        lambda: BuildInfo("0123456789abcdef", "2024-05-01T10:00:00+00:00", True))
    assert version.get_version_string() == "0123456-dirty 2024-05-01T10:00:00+00:00"


def test_version_string_unknown(monkeypatch):
    for getter in ("_from_git_repo", "_from_embedded_file", "_from_direct_url"):
        monkeypatch.setattr(version, getter, lambda: None)
    assert version.get_build_info() == BuildInfo(None, None, False)
    assert version.get_version_string() == "unknown unknown"


def test_main_prints_version(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["hscroll", "--version"])
    monkeypatch.setattr("hscroll.__main__.get_version_string", lambda: "abc1234 today")
    main()
    assert capsys.readouterr().out.strip() == "abc1234 today"
