#!/usr/bin/env python
# nutconf/errors.py - Error kinds and exceptions raised by nutconf
#
# This library is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this library.  If not, see <http://www.gnu.org/licenses/>.
"""
Error taxonomy for nutconf.

Option-shape problems are collected as :class:`OptionError` values during
validation and reported together. Everything that has to stop the run
(record materialization, configuration file I/O) is raised as a
:class:`NutconfError` subclass and handled at the tool boundary.
"""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional

__all__ = [
    'ErrorKind', 'OptionError',
    'NutconfError', 'MaterializationError', 'HostPortParseError',
    'PortParseError', 'PowerValueParseError', 'ConfigurationError',
    'ConfigDirectoryError', 'ConfigParseError', 'ConfigWriteError',
    'ConfigSyntaxError',
]


class ErrorKind(Enum):
    UNKNOWN_OPTION = 'unknown option'
    DUPLICATE_SCALAR_OPTION = 'duplicate option'
    MISSING_ARGUMENT = 'missing argument'
    ARITY_MISMATCH = 'wrong argument count'
    INVALID_ENUM_VALUE = 'invalid value'
    MUTUAL_EXCLUSION_VIOLATION = 'mutually exclusive options'
    STRAY_ARGUMENT = 'unexpected argument'
    HOST_PORT_PARSE_ERROR = 'bad host specification'
    PORT_PARSE_ERROR = 'bad port specification'
    POWER_VALUE_PARSE_ERROR = 'bad power value'


class OptionError(NamedTuple):
    """One problem found while validating the command line."""
    kind: ErrorKind
    message: str
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


class NutconfError(Exception):
    """Base class for failures that abort a nutconf run."""
    kind: Optional[ErrorKind] = None


class MaterializationError(NutconfError, ValueError):
    """A validated option value could not be turned into a typed record."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f'failed to parse {self.what} "{value}"')

    what = 'value'


class HostPortParseError(MaterializationError):
    kind = ErrorKind.HOST_PORT_PARSE_ERROR
    what = 'host specification'


class PortParseError(MaterializationError):
    kind = ErrorKind.PORT_PARSE_ERROR
    what = 'port specification'


class PowerValueParseError(MaterializationError):
    kind = ErrorKind.POWER_VALUE_PARSE_ERROR
    what = 'power value'


class ConfigurationError(NutconfError):
    """Reading or writing the configuration directory failed."""

    def __init__(self, path, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        super().__init__(self._describe())

    def _describe(self) -> str:
        return str(self.path)


class ConfigDirectoryError(ConfigurationError):
    def _describe(self) -> str:
        return f"Configuration directory {self.path} isn't available"


class ConfigParseError(ConfigurationError):
    def _describe(self) -> str:
        return f'Failed to parse {self.path}'


class ConfigWriteError(ConfigurationError):
    def _describe(self) -> str:
        return f'Failed to write {self.path}'


class ConfigSyntaxError(ValueError):
    """A configuration line could not be tokenized or interpreted."""

    def __init__(self, line_no: int, message: str):
        self.line_no = line_no
        super().__init__(f'line {line_no}: {message}')
