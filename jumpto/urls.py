"""Derive secondary URLs from a canonical repository URL."""

from __future__ import annotations

from urllib.parse import quote

DEFAULT_WEB_HOST = "github.com"
DEFAULT_CI_HOST = "travis-ci.org"
RUST_DOC_SEARCH_URL = "https://doc.rust-lang.org/std/index.html?search="


def with_commit(repo_url: str, commit_hash: str) -> str:
    """Page of a single commit. The hash is passed through as-is."""
    return f"{repo_url}/commit/{commit_hash}"


def to_ci_url(
    repo_url: str,
    ci_host: str = DEFAULT_CI_HOST,
    web_host: str = DEFAULT_WEB_HOST,
) -> str:
    """Swap the web host for the CI host.

    A URL that does not mention web_host comes back unchanged.
    """
    return repo_url.replace(web_host, ci_host)


def doc_search_url(term: str, base: str = RUST_DOC_SEARCH_URL) -> str:
    return base + quote(term, safe="")
