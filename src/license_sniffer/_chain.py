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

"""First-success combinator for ordered async attempts."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

__all__ = ['first']

T = TypeVar('T')
R = TypeVar('R')


async def first(
    items: Iterable[T],
    attempt: Callable[[T], Awaitable[R | None]],
    default: R,
) -> R:
    """Return the first truthy result of *attempt* over *items*.

    Items are tried one at a time, in order; trying stops at the
    first truthy result.  An exception raised by *attempt* propagates
    immediately and no further items are tried.

    Args:
        items: Candidates, in priority order.
        attempt: Async function applied to each candidate.
        default: Returned when every attempt result is falsy.
    """
    for item in items:
        value = await attempt(item)
        if value:
            return value
    return default
