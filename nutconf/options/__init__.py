#!/usr/bin/env python
# nutconf/options/__init__.py - Command line option parsing and validation
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
"""Command line option store, catalog and validation."""

from nutconf.options.store import ArgumentStore, OptionMode, OptionOccurrence
from nutconf.options.catalog import CATALOG, Family, OptionDescriptor, OptionKind
from nutconf.options.model import (
    DeviceSpec, ListenAddrSpec, MonitorSpec, ValidationResult, validate,
)

__all__ = [
    'ArgumentStore', 'OptionMode', 'OptionOccurrence',
    'CATALOG', 'Family', 'OptionDescriptor', 'OptionKind',
    'DeviceSpec', 'ListenAddrSpec', 'MonitorSpec', 'ValidationResult', 'validate',
]
