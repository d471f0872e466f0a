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
"""StructlogAdapter — default LoggingPort implementation using structlog."""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

from causeway.core.config import Config

_FORMATS = ("console", "json")


class StructlogAdapter:
    """Logging adapter backed by structlog, rendering through stdlib handlers.

    Configuration keys (under ``causeway.logging``):

    - ``level.root``: root level, ``INFO`` by default
    - ``level.<module>``: per-logger level overrides
    - ``format``: ``console`` (coloured, for terminals) or ``json`` (one object per line)
    - ``file``: optional path that also receives every event as JSON lines
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._file: str | None = None
        self._module_levels: dict[str, str] = {}
        self._handlers: list[logging.Handler] = []

    def configure(self, config: Config) -> None:
        """Configure structlog from the logging section of config."""
        level_section = dict(config.get_section("causeway.logging.level"))
        level_section.pop("root", None)
        self._root_level = str(config.get("causeway.logging.level.root", "INFO")).upper()
        self._module_levels = {k: str(v).upper() for k, v in level_section.items()}
        fmt = str(config.get("causeway.logging.format", "console")).lower()
        self._format = fmt if fmt in _FORMATS else "console"
        file = config.get("causeway.logging.file")
        self._file = str(file) if file else None

        self.close()
        self._setup_structlog()
        self._apply_levels()

    def get_logger(self, name: str) -> Any:
        """Get a structlog BoundLogger by name."""
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the log level for a specific stdlib logger."""
        log_level = getattr(logging, level.upper(), logging.INFO)
        logging.getLogger(name).setLevel(log_level)

    def close(self) -> None:
        """Remove the handlers this adapter installed and close them."""
        root = logging.getLogger()
        for handler in self._handlers:
            root.removeHandler(handler)
            handler.close()
        self._handlers = []

    def _setup_structlog(self) -> None:
        """Configure structlog processors and stdlib handlers."""
        log_level = getattr(logging, self._root_level, logging.INFO)

        shared: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]

        structlog.configure(
            processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )

        renderer: structlog.types.Processor
        if self._format == "json":
            renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
        else:
            renderer = structlog.dev.ConsoleRenderer()

        handlers: list[logging.Handler] = [self._handler(logging.StreamHandler(self._stream or sys.stderr), renderer)]
        if self._file:
            file_handler = logging.FileHandler(self._file, encoding="utf-8")
            handlers.append(self._handler(file_handler, structlog.processors.JSONRenderer(ensure_ascii=False)))

        logging.basicConfig(handlers=handlers, level=log_level, force=True)
        self._handlers = handlers

    @staticmethod
    def _handler(handler: logging.Handler, renderer: structlog.types.Processor) -> logging.Handler:
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            )
        )
        return handler

    def _apply_levels(self) -> None:
        """Apply per-module log levels."""
        for module, level in self._module_levels.items():
            self.set_level(module, level)
