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
"""LoggingPort: how Causeway installs and tears down its log sinks.

An implementation owns the handlers it installs on the root logger. The
``causeway.logging`` section it reads selects the console sink format
(``console`` or ``json``), an optional ``file`` sink that always receives
JSON lines, and the root and per-module levels. ``close`` detaches and
closes exactly those handlers so a second ``configure`` (or a short-lived
CLI invocation) never leaks an open stream or file.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import structlog

from causeway.core.config import Config


@runtime_checkable
class LoggingPort(Protocol):
    def configure(self, config: Config) -> None:
        """Install the stream sink, and the file sink when one is configured."""
        ...

    def get_logger(self, name: str) -> structlog.stdlib.BoundLogger: ...

    def set_level(self, name: str, level: str) -> None: ...

    def close(self) -> None:
        """Detach and close every handler installed by ``configure``."""
        ...
