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

"""Tests for license_sniffer.logging module."""

from __future__ import annotations

import logging
from pathlib import Path

from license_sniffer.logging import configure_logging, get_logger, stringify_paths


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_default_level_is_info(self) -> None:
        """Default logging level should be INFO."""
        configure_logging()
        assert logging.root.level == logging.INFO

    def test_verbose_sets_debug(self) -> None:
        """Verbose flag should set DEBUG level."""
        configure_logging(verbose=True)
        assert logging.root.level == logging.DEBUG

    def test_quiet_sets_warning(self) -> None:
        """Quiet flag should set WARNING level."""
        configure_logging(quiet=True)
        assert logging.root.level == logging.WARNING

    def test_quiet_beats_verbose(self) -> None:
        """Quiet wins when both flags are given."""
        configure_logging(verbose=True, quiet=True)
        assert logging.root.level == logging.WARNING

    def test_json_log_does_not_crash(self) -> None:
        """JSON log mode should configure and log a Path without errors."""
        configure_logging(json_log=True)
        log = get_logger()
        log.info('test_json', module=Path('node_modules/a'))


class TestStringifyPaths:
    """Tests for the structlog path processor."""

    def test_path_value(self) -> None:
        """Path values become plain strings."""
        result = stringify_paths(None, 'info', {'event': 'x', 'module': Path('a/b')})
        assert result == {'event': 'x', 'module': str(Path('a/b'))}

    def test_tuple_of_paths(self) -> None:
        """Tuples holding paths become lists of strings."""
        result = stringify_paths(None, 'debug', {'event': 'x', 'paths': (Path('a'), 'b')})
        assert result['paths'] == ['a', 'b']

    def test_other_values_untouched(self) -> None:
        """Strings, numbers and tuples of names pass through unchanged."""
        event = {'event': 'x', 'count': 3, 'licenses': ('MIT',), 'flag': None}
        assert stringify_paths(None, 'info', event) == event
