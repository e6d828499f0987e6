#!/usr/bin/env python
# nutconf/options/catalog.py - Table of options understood by nutconf
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
"""Option catalog.

Each recognized double-dashed option is described once, here; validation
and the usage text are both driven by :data:`CATALOG`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from nutconf.common import NutMode

__all__ = ['OptionKind', 'Family', 'OptionDescriptor', 'CATALOG', 'FAMILY_OPTIONS', 'lookup']


class OptionKind(Enum):
    HELP = 'help'
    FLAG = 'flag'
    VALUE = 'value'
    FAMILY = 'family'


class Family(Enum):
    MONITOR = 'monitor'
    LISTEN = 'listen'
    DEVICE = 'device'


@dataclass(frozen=True)
class OptionDescriptor:
    name: str
    kind: OptionKind
    min_args: int = 0
    max_args: int = 0
    family: Optional[Family] = None
    keeps_existing: bool = False
    choices: Optional[Tuple[str, ...]] = None
    metavar: str = 'argument'
    # extra line shown when too many arguments were given
    overflow_hint: Optional[str] = None

    @property
    def option(self) -> str:
        return '--' + self.name


def _family(family: Family, min_args: int, max_args: int, **kwargs) -> Tuple[OptionDescriptor, OptionDescriptor]:
    name = family.value
    return (
        OptionDescriptor(f'set-{name}', OptionKind.FAMILY, min_args, max_args, family, False, **kwargs),
        OptionDescriptor(f'add-{name}', OptionKind.FAMILY, min_args, max_args, family, True, **kwargs),
    )


_DESCRIPTORS = (
    OptionDescriptor('help', OptionKind.HELP),
    OptionDescriptor('autoconfigure', OptionKind.FLAG),
    OptionDescriptor('is-configured', OptionKind.FLAG),
    OptionDescriptor('local', OptionKind.VALUE, 1, 1, metavar='directory'),
    OptionDescriptor('system', OptionKind.FLAG),
    OptionDescriptor('mode', OptionKind.VALUE, 1, 1, choices=NutMode.names()),
    *_family(Family.MONITOR, 6, 6),
    *_family(Family.LISTEN, 1, 2),
    *_family(Family.DEVICE, 3, 4, overflow_hint='perhaps you need to quote description?'),
)

CATALOG: Dict[str, OptionDescriptor] = {d.name: d for d in _DESCRIPTORS}

# family -> (set descriptor, add descriptor)
FAMILY_OPTIONS: Dict[Family, Tuple[OptionDescriptor, OptionDescriptor]] = {
    family: (CATALOG[f'set-{family.value}'], CATALOG[f'add-{family.value}'])
    for family in Family
}


def lookup(name: str) -> Optional[OptionDescriptor]:
    return CATALOG.get(name)
