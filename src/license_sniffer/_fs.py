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

"""Async filesystem primitives.

Blocking :mod:`pathlib` calls run in a worker thread via
:func:`asyncio.to_thread`.  ``OSError`` is translated at this boundary:
a missing path becomes :class:`~license_sniffer.errors.NotFoundError`,
anything else :class:`~license_sniffer.errors.FilesystemError`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from license_sniffer.errors import FilesystemError, NotFoundError

__all__ = [
    'file_exists',
    'list_directory',
    'list_directory_if_exists',
    'read_text_file',
]


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8', errors='replace')
    except FileNotFoundError as exc:
        raise NotFoundError(path) from exc
    except OSError as exc:
        raise FilesystemError(f'Cannot read {path}: {exc}') from exc


def _exists(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def _listdir(path: Path) -> list[str]:
    try:
        return sorted(entry.name for entry in path.iterdir())
    except FileNotFoundError as exc:
        raise NotFoundError(path) from exc
    except OSError as exc:
        raise FilesystemError(f'Cannot list {path}: {exc}') from exc


async def read_text_file(path: Path) -> str:
    """Read *path* as UTF-8 text.

    Undecodable bytes become U+FFFD; a legacy-encoded LICENSE file is
    still readable text, not a failure.

    Raises:
        NotFoundError: *path* does not exist.
        FilesystemError: Any other read failure.
    """
    return await asyncio.to_thread(_read, path)


async def file_exists(path: Path) -> bool:
    """Return ``True`` if *path* is an existing regular file.  Never raises."""
    return await asyncio.to_thread(_exists, path)


async def list_directory(path: Path) -> list[str]:
    """Return the entry names of directory *path*, sorted.

    Raises:
        NotFoundError: *path* does not exist.
        FilesystemError: Any other listing failure.
    """
    return await asyncio.to_thread(_listdir, path)


async def list_directory_if_exists(path: Path) -> list[str]:
    """Like :func:`list_directory`, but an absent directory lists as empty."""
    try:
        return await list_directory(path)
    except NotFoundError:
        return []
