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

"""Tests for the first-success async combinator."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any

import pytest
from license_sniffer._chain import first


def _run(coro: Coroutine[Any, Any, Any]) -> Any:  # noqa: ANN401
    return asyncio.run(coro)


class TestFirst:
    """Tests for first()."""

    def test_returns_first_truthy(self) -> None:
        """Test returns first truthy."""
        seen: list[int] = []

        async def attempt(n: int) -> str | None:
            seen.append(n)
            return f'hit-{n}' if n >= 2 else None

        assert _run(first([1, 2, 3], attempt, 'none')) == 'hit-2'
        assert seen == [1, 2]

    def test_default_when_all_falsy(self) -> None:
        """Test default when all falsy."""

        async def attempt(n: int) -> str | None:
            return None

        assert _run(first([1, 2], attempt, 'none')) == 'none'

    def test_empty_items(self) -> None:
        """Test empty items."""

        async def attempt(n: int) -> str | None:
            raise AssertionError('not called')

        assert _run(first([], attempt, 'none')) == 'none'

    def test_falsy_values_are_skipped(self) -> None:
        """Test falsy values are skipped."""

        async def attempt(value: str) -> str:
            return value

        assert _run(first(['', 'x'], attempt, 'none')) == 'x'

    def test_exception_stops_iteration(self) -> None:
        """Test exception stops iteration."""
        seen: list[int] = []

        async def attempt(n: int) -> str | None:
            seen.append(n)
            if n == 1:
                raise OSError('boom')
            return 'late'

        with pytest.raises(OSError, match='boom'):
            _run(first([1, 2], attempt, 'none'))
        assert seen == [1]
