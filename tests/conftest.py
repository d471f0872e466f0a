"""Shared fixtures for Causeway tests."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator

import pytest

from causeway.cli.errors import ConfigParseError
from causeway.core.build import BuildInfo, reset_build_info
from causeway.kernel.types import NamedSource, SourceSpan

TEST_GIT_HASH = "abc1234"
TEST_DOCS_URL = "https://docs.example.test/causeway"


@pytest.fixture(autouse=True)
def pinned_build_info(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Resolve process-wide build metadata from the environment, never from git."""
    monkeypatch.setenv("CAUSEWAY_BUILD_GIT_HASH", TEST_GIT_HASH)
    monkeypatch.setenv("CAUSEWAY_BUILD_DOCS_URL", TEST_DOCS_URL)
    reset_build_info()
    yield
    reset_build_info()


@pytest.fixture
def build() -> BuildInfo:
    return BuildInfo(git_hash=TEST_GIT_HASH, docs_base_url=TEST_DOCS_URL)


@pytest.fixture
def sequential_ids() -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def config_error() -> Callable[..., ConfigParseError]:
    def make(path: str = "config.json", text: str = '{ "key": !!invalid }', span: tuple[int, int] = (10, 9)):
        return ConfigParseError(path=path, src=NamedSource(path, text), span=SourceSpan(*span))

    return make
