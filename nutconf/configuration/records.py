#!/usr/bin/env python
# nutconf/configuration/records.py - Typed monitor and listen address records
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
Typed records written to ``upsmon.conf`` and ``upsd.conf``.

The option model keeps monitor and listen specifications as the raw
strings given on the command line. :func:`materialize` turns all of them
into :class:`Monitor` and :class:`Listen` records, raising on the first
value that does not parse; nothing is written in that case.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence, Tuple, Type

from nutconf.common import MASTER, MAX_PORT, SLAVE
from nutconf.errors import (
    HostPortParseError, MaterializationError, PortParseError, PowerValueParseError,
)
from nutconf.options.model import ListenAddrSpec, MonitorSpec, ValidationResult

__all__ = [
    'Monitor', 'Listen', 'Materialized', 'split_host_port',
    'monitor_from_spec', 'listen_from_spec', 'materialize',
]

_UNSIGNED = re.compile(r'[0-9]+')


def _unsigned(text: str, error: Type[MaterializationError], value: str,
              limit: Optional[int] = None) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise error(value)
    number = int(text)
    if limit is not None and number > limit:
        raise error(value)
    return number


def split_host_port(host_port: str) -> Tuple[str, int]:
    """Split ``host[:port]`` on its last colon; port 0 means unset.

    >>> split_host_port('localhost:3493')
    ('localhost', 3493)
    >>> split_host_port('localhost')
    ('localhost', 0)
    """
    host, sep, port = host_port.rpartition(':')
    if not sep:
        return host_port, 0
    return host, _unsigned(port, HostPortParseError, host_port, MAX_PORT)


@dataclass(frozen=True)
class Monitor:
    ups_name: str
    hostname: str
    port: int = 0
    power_value: int = 1
    username: str = ''
    password: str = ''
    role: str = SLAVE

    @property
    def is_master(self) -> bool:
        return self.role == MASTER

    @property
    def system(self) -> str:
        """``ups@host[:port]`` as written after MONITOR."""
        system = f'{self.ups_name}@{self.hostname}'
        if self.port:
            system += f':{self.port}'
        return system

    def arguments(self) -> List[str]:
        return [self.system, str(self.power_value), self.username, self.password, self.role]

    @classmethod
    def from_arguments(cls, args: Sequence[str]) -> 'Monitor':
        """Build from the arguments of a MONITOR directive."""
        if len(args) != 5:
            raise ValueError(f'MONITOR takes 5 arguments, got {len(args)}')
        system, power_value, username, password, role = args
        ups_name, at, host_port = system.partition('@')
        if not at:
            raise ValueError(f'MONITOR system "{system}" lacks a host')
        hostname, port = split_host_port(host_port)
        return cls(ups_name, hostname, port,
                   _unsigned(power_value, PowerValueParseError, power_value),
                   username, password, role)


@dataclass(frozen=True)
class Listen:
    address: str
    port: Optional[int] = None

    def arguments(self) -> List[str]:
        if self.port is None:
            return [self.address]
        return [self.address, str(self.port)]

    @classmethod
    def from_arguments(cls, args: Sequence[str]) -> 'Listen':
        if not 1 <= len(args) <= 2:
            raise ValueError(f'LISTEN takes 1 or 2 arguments, got {len(args)}')
        port = _unsigned(args[1], PortParseError, args[1], MAX_PORT) if len(args) > 1 else None
        return cls(args[0], port)


class Materialized(NamedTuple):
    monitors: List[Monitor]
    listens: List[Listen]


def monitor_from_spec(spec: MonitorSpec) -> Monitor:
    hostname, port = split_host_port(spec.host_port)
    power_value = _unsigned(spec.power_value, PowerValueParseError, spec.power_value)
    return Monitor(
        ups_name=spec.ups_id,
        hostname=hostname,
        port=port,
        power_value=power_value,
        username=spec.user,
        password=spec.password,
        role=MASTER if spec.is_master else SLAVE,
    )


def listen_from_spec(spec: ListenAddrSpec) -> Listen:
    if spec.port is None or spec.port == '':
        return Listen(spec.address)
    return Listen(spec.address, _unsigned(spec.port, PortParseError, spec.port, MAX_PORT))


def materialize(result: ValidationResult) -> Materialized:
    """Build every typed record of *result*; the first bad value raises."""
    return Materialized(
        monitors=[monitor_from_spec(spec) for spec in result.monitors],
        listens=[listen_from_spec(spec) for spec in result.listens],
    )
