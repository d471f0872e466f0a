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
"""Starlette exception handler that answers with an ApiError body.

Usage::

    app = Starlette(routes=..., exception_handlers={Exception: report_exception_handler})
"""

from __future__ import annotations

import structlog
from starlette.requests import Request
from starlette.responses import JSONResponse

from causeway.adapter import LibReport
from causeway.api.sink import report_api_error

HEADER_CORRELATION_ID = "X-Correlation-ID"

DEFAULT_STATUS = 500

logger = structlog.get_logger("causeway.web")


def status_code_for(lib_report: LibReport) -> int:
    """Use the root context's integer ``status_code`` when it has one."""
    status = getattr(lib_report.current_context, "status_code", None)
    if isinstance(status, int) and 400 <= status <= 599:
        return status
    return DEFAULT_STATUS


async def report_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert the raised error once and return the flat record as JSON."""
    lib_report = exc if isinstance(exc, LibReport) else LibReport.from_error(exc)
    api_error = report_api_error(lib_report, log=logger.bind(path=request.url.path, method=request.method))
    return JSONResponse(
        api_error.to_dict(),
        status_code=status_code_for(lib_report),
        headers={HEADER_CORRELATION_ID: api_error.correlation_id},
    )
