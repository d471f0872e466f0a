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
"""Boundary helper: convert a report once and log the resulting record."""

from __future__ import annotations

from typing import Any

import structlog

from causeway.api.conversion import CorrelationIdSource, ReportExt
from causeway.api.error import ApiError
from causeway.core.build import BuildInfo

logger = structlog.get_logger("causeway.api")


def report_api_error(
    report: ReportExt,
    *,
    log: Any = None,
    id_source: CorrelationIdSource | None = None,
    build: BuildInfo | None = None,
) -> ApiError:
    """Convert *report* and emit one ``api_error_reported`` event at error level.

    The full tree stays with the caller; only the flat record is logged.
    """
    api_error = report.to_api_error(id_source=id_source, build=build)
    (log or logger).error(
        "api_error_reported",
        git_hash=api_error.git_hash,
        docs_url=api_error.docs_url,
        correlation_id=api_error.correlation_id,
        title=api_error.title,
        code=api_error.code,
        history=list(api_error.history),
    )
    return api_error
