#!/usr/bin/env python
# nutconf/common.py - Constants shared across nutconf
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
from __future__ import annotations

import os
from enum import Enum, IntEnum

CONFPATH_ENV = 'NUTCONF_CONFPATH'
DEFAULT_CONFPATH = '/etc/nut'

NUT_CONF = 'nut.conf'
UPSMON_CONF = 'upsmon.conf'
UPSD_CONF = 'upsd.conf'
UPS_CONF = 'ups.conf'

MAX_PORT = 65535

# upsmon roles
MASTER = 'master'
SLAVE = 'slave'


class NutMode(str, Enum):
    STANDALONE = 'standalone'
    NETSERVER = 'netserver'
    NETCLIENT = 'netclient'
    CONTROLLED = 'controlled'
    MANUAL = 'manual'
    NONE = 'none'

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(m.value for m in cls)


class ExitCode(IntEnum):
    OK = 0
    FAILURE = 1
    INTERNAL_ERROR = 128


def default_confpath() -> str:
    """Configuration directory used unless --local is given."""
    return os.environ.get(CONFPATH_ENV) or DEFAULT_CONFPATH
