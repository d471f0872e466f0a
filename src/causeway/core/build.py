# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Process-wide build metadata: git revision and documentation base URL.

The values are resolved once, on first use, and are read-only afterwards.
Resolution order for the git hash:

1. ``causeway.build.git_hash`` (``CAUSEWAY_BUILD_GIT_HASH`` in the environment)
2. ``git rev-parse --short HEAD`` in the working directory
3. ``"unknown"``

An invalid ``causeway.build`` section never fails a caller: it is logged as
``build_info_invalid`` and the defaults are used instead.
"""

from __future__ import annotations

import subprocess
import threading
from dataclasses import dataclass
from pathlib import Path

import structlog
from pydantic import BaseModel, field_validator

from causeway.core.config import Config, config_properties
from causeway.kernel.exceptions import ConfigurationException

logger = structlog.get_logger("causeway.build")

UNKNOWN_GIT_HASH = "unknown"

DEFAULT_DOCS_URL = "https://causeway.readthedocs.io/en/latest"

_GIT_TIMEOUT_SECONDS = 2.0

_build_info: BuildInfo | None = None
_build_info_lock = threading.Lock()


@config_properties(prefix="causeway.build")
class BuildProperties(BaseModel):
    """Bindable ``causeway.build`` section."""

    git_hash: str | None = None
    docs_url: str = DEFAULT_DOCS_URL

    @field_validator("git_hash")
    @classmethod
    def _blank_is_unset(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("docs_url")
    @classmethod
    def _http_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"docs_url must be an http(s) URL, got {value!r}")
        return value.rstrip("/")


@dataclass(frozen=True)
class BuildInfo:
    """Immutable snapshot of the build identity."""

    git_hash: str = UNKNOWN_GIT_HASH
    docs_base_url: str = DEFAULT_DOCS_URL


def docs_url_for(code: str | None, base_url: str) -> str | None:
    """Return the documentation link for *code*, or ``None`` without a code."""
    if code is None:
        return None
    return f"{base_url}/#{code}"


def git_revision(cwd: str | Path | None = None) -> str | None:
    """Return the short HEAD revision of the repository at *cwd*, if any."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=_GIT_TIMEOUT_SECONDS,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        logger.debug("git_revision_unavailable", error=str(exc))
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def resolve_build_info(config: Config, cwd: str | Path | None = None) -> BuildInfo:
    """Resolve build metadata from *config*, falling back to git and then ``"unknown"``."""
    props = config.bind(BuildProperties)
    git_hash = props.git_hash or git_revision(cwd) or UNKNOWN_GIT_HASH
    return BuildInfo(git_hash=git_hash, docs_base_url=props.docs_url)


def _resolve_process_build_info() -> BuildInfo:
    try:
        info = resolve_build_info(Config.from_sources(Path.cwd()))
    except ConfigurationException as exc:
        logger.warning("build_info_invalid", error=str(exc), code=exc.code())
        return BuildInfo()
    logger.debug("build_info_resolved", git_hash=info.git_hash, docs_base_url=info.docs_base_url)
    return info


def build_info() -> BuildInfo:
    """Process-wide build metadata, resolved by the first caller only."""
    global _build_info
    info = _build_info
    if info is None:
        with _build_info_lock:
            if _build_info is None:
                _build_info = _resolve_process_build_info()
            info = _build_info
    return info


def reset_build_info() -> None:
    """Forget the resolved metadata so the next call resolves it again."""
    global _build_info
    with _build_info_lock:
        _build_info = None
