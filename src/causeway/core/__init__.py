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
"""Causeway Core — configuration and process-wide build metadata."""

from causeway.core.build import (
    UNKNOWN_GIT_HASH,
    BuildInfo,
    BuildProperties,
    build_info,
    docs_url_for,
    reset_build_info,
    resolve_build_info,
)
from causeway.core.config import Config, config_properties

__all__ = [
    "BuildInfo",
    "BuildProperties",
    "Config",
    "UNKNOWN_GIT_HASH",
    "build_info",
    "config_properties",
    "docs_url_for",
    "reset_build_info",
    "resolve_build_info",
]
