#!/usr/bin/env python
# nutconf/configuration/__init__.py - NUT configuration files and merge policies
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
"""NUT configuration documents, typed records and merge policies."""

from nutconf.configuration.records import Listen, Monitor, materialize
from nutconf.configuration.documents import (
    NutConfiguration, UpsConfiguration, UpsdConfiguration, UpsmonConfiguration,
)
from nutconf.configuration.merge import (
    merge_devices, merge_list, set_devices, set_listens, set_monitors,
)
from nutconf.configuration.files import check_directory, is_configured, source, store

__all__ = [
    'Listen', 'Monitor', 'materialize',
    'NutConfiguration', 'UpsConfiguration', 'UpsdConfiguration', 'UpsmonConfiguration',
    'merge_devices', 'merge_list', 'set_devices', 'set_listens', 'set_monitors',
    'check_directory', 'is_configured', 'source', 'store',
]
