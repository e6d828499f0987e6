#!/usr/bin/env python
# nutconf/tool/cli.py - Usage text and option error report for nutconf
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
"""Command-line text output for nutconf.

Kept apart from :mod:`nutconf.tool.main` so the usage text and the invalid
option report can be unit-tested without running the tool.
"""
from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from nutconf.common import NutMode, default_confpath
from nutconf.errors import ErrorKind
from nutconf.options.catalog import CATALOG
from nutconf.options.model import ValidationResult

__all__ = ['usage_lines', 'print_usage', 'report_lines', 'report_invalid', 'error_kinds']

_COLUMN = 34

# option name -> (argument synopsis, help lines)
_HELP = {
    'help': ('', ['Display this help and exit']),
    'autoconfigure': ('', ['Perform autoconfiguration']),
    'is-configured': ('', ['Checks whether NUT is configured']),
    'local': ('<directory>', ['Sets configuration directory']),
    'system': ('', ['Sets configuration directory to {confpath} (default)']),
    'mode': ('<NUT mode>', ['Sets NUT mode (see below)']),
    'set-monitor': ('<spec>', [
        'Configures one monitor (see below)',
        'All existing entries are removed; however, it may be',
        'specified multiple times to set multiple entries',
    ]),
    'add-monitor': ('<spec>', [
        'Same as --set-monitor, but keeps existing entries',
        'The two options are mutually exclusive',
    ]),
    'set-listen': ('<addr> [<port>]', [
        'Configures one listen address for the NUT daemon',
        'All existing entries are removed; however, it may be',
        'specified multiple times to set multiple entries',
    ]),
    'add-listen': ('<addr> [<port>]', [
        'Same as --set-listen, but keeps existing entries',
        'The two options are mutually exclusive',
    ]),
    'set-device': ('<spec>', [
        'Configures one UPS device (see below)',
        'All existing devices are removed; however, it may be',
        'specified multiple times to set multiple devices',
    ]),
    'add-device': ('<spec>', [
        'Same as --set-device, but keeps existing devices',
        'The two options are mutually exclusive',
    ]),
}

_EPILOG = [
    '',
    'NUT modes: ' + ', '.join(NutMode.names()),
    'Monitor is specified by the following sequence:',
    '    <ups_ID> <host>[:<port>] <power_value> <user> <passwd> ("master"|"slave")',
    'UPS device is specified by the following sequence:',
    '    <ups_ID> <driver> <port> [<description>]',
    '',
]


def usage_lines(prog: str = 'nutconf', confpath: Optional[str] = None) -> List[str]:
    confpath = confpath or default_confpath()
    lines = [f'Usage: {prog} [OPTIONS]', '', 'OPTIONS:']
    for name in CATALOG:
        synopsis, text = _HELP[name]
        head = f'    --{name} {synopsis}'.rstrip()
        for i, line in enumerate(text):
            lines.append(f'{head if i == 0 else "":<{_COLUMN}}{line.format(confpath=confpath)}')
    lines.extend(_EPILOG)
    return lines


def print_usage(prog: str = 'nutconf', file: Optional[TextIO] = None) -> None:
    file = file or sys.stderr
    for line in usage_lines(prog):
        print(line, file=file)


def report_lines(result: ValidationResult) -> List[str]:
    """Lines describing why *result* is invalid.

    :raises ValueError: if *result* is valid
    """
    if result.valid:
        raise ValueError('No invalid options to report')

    lines = [f'Unknown option: {option}' for option in result.unknown_options]
    for error in result.errors:
        lines.append(f'Option error: {error.message}')
        if error.hint:
            lines.append(f'    ({error.hint})')
    lines.extend(f'Unexpected argument: {arg}' for arg in result.top_level_arguments)
    return lines


def report_invalid(result: ValidationResult, file: Optional[TextIO] = None) -> None:
    file = file or sys.stderr
    for line in report_lines(result):
        print(line, file=file)


def error_kinds(result: ValidationResult) -> List[ErrorKind]:
    """Every problem of *result* as an ErrorKind, in report order."""
    kinds = [ErrorKind.UNKNOWN_OPTION] * len(result.unknown_options)
    kinds.extend(e.kind for e in result.errors)
    kinds.extend([ErrorKind.STRAY_ARGUMENT] * len(result.top_level_arguments))
    return kinds
