# Copyright 2026 Google LLC
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
#
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy for license_sniffer.

Every error raised on purpose by this package derives from
:class:`LicenseSnifferError`, so callers can catch one type.  A
"no license found" outcome is never an error; it is reported as
:data:`license_sniffer._types.UNKNOWN`.
"""

from __future__ import annotations

__all__ = [
    'CatalogError',
    'ConfigError',
    'FilesystemError',
    'LicenseSnifferError',
    'NotFoundError',
    'ParseError',
]


class LicenseSnifferError(Exception):
    """Base class for license_sniffer errors.

    Attributes:
        message: Human-readable description of the problem.
        hint: Optional actionable suggestion for the user.
    """

    def __init__(self, message: str, *, hint: str = '') -> None:
        self.message = message
        self.hint = hint
        super().__init__(message)


class NotFoundError(LicenseSnifferError):
    """A required file or directory does not exist."""

    def __init__(self, path: object, *, hint: str = '') -> None:
        self.path = str(path)
        super().__init__(f'No such file or directory: {self.path}', hint=hint)


class ParseError(LicenseSnifferError, ValueError):
    """A manifest is not valid JSON."""


class FilesystemError(LicenseSnifferError):
    """An unexpected filesystem failure other than "not found"."""


class ConfigError(LicenseSnifferError):
    """The configuration file has an invalid key or value."""


class CatalogError(LicenseSnifferError):
    """The license catalog data failed validation."""
