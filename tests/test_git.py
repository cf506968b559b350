"""Tests for origin URL parsing and git remote access."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from jumpto.errors import NotAGitRepository, OriginUrlNotFound, UnsupportedFormat
from jumpto.git import _strip_git_suffix, get_head_sha, get_origin_url, parse_origin_url

# ============================================================
# URL PARSING
# ============================================================


class TestParseOriginUrl:
    def test_ssh_shorthand(self):
        assert parse_origin_url("git@github.com:user/repo.git") == "https://github.com/user/repo"

    def test_ssh_shorthand_no_suffix(self):
        assert parse_origin_url("git@github.com:user/repo") == "https://github.com/user/repo"

    def test_ssh_keeps_remote_host(self):
        assert parse_origin_url("git@gitlab.com:org/sub/repo.git") == "https://gitlab.com/org/sub/repo"

    def test_ssh_other_user(self):
        assert parse_origin_url("deploy@git.company.com:team/project.git") == (
            "https://git.company.com/team/project"
        )

    def test_https(self):
        assert parse_origin_url("https://github.com/user/repo.git") == "https://github.com/user/repo"

    def test_https_no_suffix(self):
        assert parse_origin_url("https://github.com/user/repo") == "https://github.com/user/repo"

    def test_http_scheme_preserved(self):
        assert parse_origin_url("http://git.local/team/repo.git") == "http://git.local/team/repo"

    def test_https_with_and_without_suffix_agree(self):
        assert parse_origin_url("https://github.com/u/r.git") == parse_origin_url(
            "https://github.com/u/r"
        )

    def test_git_in_middle_not_stripped(self):
        assert parse_origin_url("git@github.com:user/user.github.io") == (
            "https://github.com/user/user.github.io"
        )
        assert parse_origin_url("https://github.com/user/my.gitconfig") == (
            "https://github.com/user/my.gitconfig"
        )

    def test_only_one_suffix_stripped(self):
        assert parse_origin_url("https://github.com/user/repo.git.git") == (
            "https://github.com/user/repo.git"
        )

    def test_trailing_slash(self):
        assert parse_origin_url("https://github.com/user/repo.git/") == "https://github.com/user/repo"

    def test_whitespace_stripped(self):
        assert parse_origin_url("  git@github.com:user/repo.git  \n") == "https://github.com/user/repo"

    def test_result_never_ends_in_git(self):
        for raw in ("git@github.com:u/r.git", "https://github.com/u/r.git"):
            result = parse_origin_url(raw)
            assert result.startswith(("https://", "http://"))
            assert not result.endswith(".git")

    @pytest.mark.parametrize(
        "raw",
        [
            "svn://example.com/repo",
            "ssh://git@github.com/user/repo.git",
            "file:///local/path/repo.git",
            "/local/path/repo.git",
            "",
            "not a url at all",
            "https://",
            "git@github.com:",
        ],
    )
    def test_unsupported(self, raw):
        with pytest.raises(UnsupportedFormat):
            parse_origin_url(raw)

    def test_unsupported_keeps_input(self):
        with pytest.raises(UnsupportedFormat) as info:
            parse_origin_url("svn://example.com/repo")
        assert info.value.raw == "svn://example.com/repo"
        assert "svn://example.com/repo" in str(info.value)


def test_strip_git_suffix_idempotent():
    once = _strip_git_suffix("github.com/u/r.git")
    assert once == "github.com/u/r"
    assert _strip_git_suffix(once) == once


# ============================================================
# GET ORIGIN URL
# ============================================================


class TestGetOriginUrl:
    def test_returns_remote(self, tmp_path):
        def mock_run_git(args, cwd):
            if args == ["rev-parse", "--git-dir"]:
                return ".git"
            if args == ["remote", "get-url", "origin"]:
                return "git@github.com:user/my-project.git"
            return None

        with patch("jumpto.git._run_git", side_effect=mock_run_git):
            assert get_origin_url(tmp_path) == "git@github.com:user/my-project.git"

    def test_not_a_repo(self, tmp_path):
        with patch("jumpto.git._run_git", return_value=None):
            with pytest.raises(NotAGitRepository):
                get_origin_url(tmp_path)

    def test_missing_origin(self, tmp_path):
        def mock_run_git(args, cwd):
            if args == ["rev-parse", "--git-dir"]:
                return ".git"
            return None

        with patch("jumpto.git._run_git", side_effect=mock_run_git):
            with pytest.raises(OriginUrlNotFound):
                get_origin_url(tmp_path)


class TestGetHeadSha:
    def test_returns_sha(self, tmp_path):
        with patch("jumpto.git._run_git", return_value="abc1234def") as run:
            assert get_head_sha(tmp_path) == "abc1234def"
        assert run.call_args.args[0] == ["rev-parse", "HEAD"]

    def test_non_git_returns_none(self, tmp_path):
        with patch("jumpto.git._run_git", return_value=None):
            assert get_head_sha(tmp_path) is None


# ============================================================
# INTEGRATION (uses real git)
# ============================================================


def _has_git() -> bool:
    try:
        subprocess.run(["git", "--version"], capture_output=True, timeout=5, check=True)
        return True
    except Exception:
        return False


@pytest.mark.skipif(not _has_git(), reason="git binary not available")
class TestGitIntegration:
    def _git(self, cwd: Path, *args: str) -> None:
        subprocess.run(["git", *args], cwd=cwd, capture_output=True, check=True, timeout=10)

    def test_origin_of_fresh_repo(self, tmp_path):
        self._git(tmp_path, "init")
        self._git(tmp_path, "remote", "add", "origin", "git@github.com:acme/widget.git")

        raw = get_origin_url(tmp_path)
        assert parse_origin_url(raw) == "https://github.com/acme/widget"

    def test_repo_without_origin(self, tmp_path):
        self._git(tmp_path, "init")
        with pytest.raises(OriginUrlNotFound):
            get_origin_url(tmp_path)

    def test_plain_directory(self, tmp_path):
        plain = tmp_path / "plain"
        plain.mkdir()
        # GIT_CEILING_DIRECTORIES stops discovery from walking into a parent repo
        with patch.dict("os.environ", {"GIT_CEILING_DIRECTORIES": str(tmp_path)}):
            with pytest.raises(NotAGitRepository):
                get_origin_url(plain)
