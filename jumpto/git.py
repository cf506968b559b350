"""Git remote access and origin URL normalization.

Turns whatever `git remote get-url origin` prints into the canonical web
address of the repository.

Supported remote formats:
1. SSH shorthand (user@host:owner/repo.git) -> https://host/owner/repo
2. HTTP(S) URLs (https://host/owner/repo.git) -> same URL minus .git
"""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path

from .errors import NotAGitRepository, OriginUrlNotFound, UnsupportedFormat

logger = logging.getLogger(__name__)

_SSH_SHORTHAND = re.compile(r"^[\w.-]+@([\w.-]+):(.+)$")
_HTTP_SCHEMES = ("http://", "https://")


def parse_origin_url(raw: str) -> str:
    """Normalize a git remote URL to a canonical web URL.

    The scheme of HTTP(S) remotes is preserved; SSH remotes always map
    to https. Only a trailing .git is stripped.

    Examples:
        git@github.com:user/repo.git      -> https://github.com/user/repo
        https://github.com/user/repo.git  -> https://github.com/user/repo
        http://git.local/team/repo        -> http://git.local/team/repo

    Raises:
        UnsupportedFormat: for anything else (svn://, ssh://, file paths, "").
    """
    url = raw.strip()

    # SSH shorthand: git@host:user/repo.git
    m = _SSH_SHORTHAND.match(url)
    if m:
        host = m.group(1)
        path = _strip_git_suffix(m.group(2)).lstrip("/")
        if path:
            return f"https://{host}/{path}"

    elif url.startswith(_HTTP_SCHEMES):
        scheme, rest = url.split("://", 1)
        rest = _strip_git_suffix(rest)
        if rest:
            return f"{scheme}://{rest}"

    raise UnsupportedFormat(raw)


def _strip_git_suffix(path: str) -> str:
    """Remove trailing .git and slashes."""
    path = path.rstrip("/")
    if path.endswith(".git"):
        path = path[:-4]
    return path.rstrip("/")


def get_origin_url(path: Path) -> str:
    """Return the raw URL of the origin remote for the repo containing path.

    Raises:
        NotAGitRepository: path is not inside a git work tree (or git is missing).
        OriginUrlNotFound: the repo has no origin remote URL.
    """
    resolved = path.resolve()
    if _run_git(["rev-parse", "--git-dir"], cwd=resolved) is None:
        raise NotAGitRepository(f"Not a git repository: {resolved}")

    remote_url = _run_git(["remote", "get-url", "origin"], cwd=resolved)
    if not remote_url:
        raise OriginUrlNotFound()
    logger.debug("origin remote for %s: %s", resolved, remote_url)
    return remote_url


def get_head_sha(path: Path) -> str | None:
    """Get the full HEAD commit SHA, or None for non-git / unborn HEAD."""
    return _run_git(["rev-parse", "HEAD"], cwd=path.resolve())


def _run_git(args: list[str], cwd: Path) -> str | None:
    """Run a git command and return stripped stdout, or None on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=5,
        )
        if result.returncode == 0:
            output = result.stdout.strip()
            return output if output else None
        logger.debug("git %s failed: %s", " ".join(args), result.stderr.strip())
        return None
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError) as exc:
        logger.debug("git %s could not run: %s", " ".join(args), exc)
        return None
