#!/usr/bin/env python
# nutconf/options/model.py - Validation of nutconf command line options
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
"""Option model.

:func:`validate` walks an :class:`~nutconf.options.store.ArgumentStore`
once, checks every occurrence against :data:`~nutconf.options.catalog.CATALOG`
and returns a :class:`ValidationResult` holding the scalar values, the
monitor/listen/device specs and every problem found. Validation never stops
at the first problem, so the operator sees all of them at once.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from nutconf.common import MASTER
from nutconf.errors import ErrorKind, OptionError
from nutconf.options.catalog import (
    FAMILY_OPTIONS, Family, OptionDescriptor, OptionKind, lookup,
)
from nutconf.options.store import (
    ArgumentStore, OptionMode, OptionOccurrence, SINGLE_DASH,
)

__all__ = [
    'MonitorSpec', 'ListenAddrSpec', 'DeviceSpec', 'FamilyCount',
    'ValidationResult', 'validate',
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonitorSpec:
    ups_id: str
    host_port: str
    power_value: str
    user: str
    password: str
    role: str

    @property
    def is_master(self) -> bool:
        # anything but "master" is a slave
        return self.role == MASTER


@dataclass(frozen=True)
class ListenAddrSpec:
    address: str
    port: Optional[str] = None


@dataclass(frozen=True)
class DeviceSpec:
    id: str
    driver: str
    port: str
    description: str = ''


@dataclass(frozen=True)
class FamilyCount:
    """Occurrence counts of the set-/add- options of one family."""
    set: int = 0
    add: int = 0

    @property
    def conflicting(self) -> bool:
        return self.set > 0 and self.add > 0

    @property
    def keep_existing(self) -> bool:
        return self.add > 0


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    help: bool = False
    unknown_options: Tuple[str, ...] = ()
    errors: Tuple[OptionError, ...] = ()
    top_level_arguments: Tuple[str, ...] = ()
    autoconfigure: bool = False
    is_configured: bool = False
    system: bool = False
    local: Optional[str] = None
    mode: Optional[str] = None
    monitors: Tuple[MonitorSpec, ...] = ()
    listens: Tuple[ListenAddrSpec, ...] = ()
    devices: Tuple[DeviceSpec, ...] = ()
    counts: Dict[Family, FamilyCount] = field(default_factory=dict)

    @property
    def keep_existing_monitors(self) -> bool:
        return self._count(Family.MONITOR).keep_existing

    @property
    def keep_existing_listens(self) -> bool:
        return self._count(Family.LISTEN).keep_existing

    @property
    def keep_existing_devices(self) -> bool:
        return self._count(Family.DEVICE).keep_existing

    @property
    def error_messages(self) -> List[str]:
        return [e.message for e in self.errors]

    def _count(self, family: Family) -> FamilyCount:
        return self.counts.get(family, FamilyCount())


def _build_monitor(args: Tuple[str, ...]) -> MonitorSpec:
    return MonitorSpec(*args)


def _build_listen(args: Tuple[str, ...]) -> ListenAddrSpec:
    return ListenAddrSpec(args[0], args[1] if len(args) > 1 else None)


def _build_device(args: Tuple[str, ...]) -> DeviceSpec:
    return DeviceSpec(*args)


_BUILDERS = {
    Family.MONITOR: _build_monitor,
    Family.LISTEN: _build_listen,
    Family.DEVICE: _build_device,
}


class _Validator:
    """Single pass over the store; state lives only for one validate() call."""

    def __init__(self, store: ArgumentStore):
        self.store = store
        self.unknown: List[str] = []
        self.errors: List[OptionError] = []
        self.scalars: Dict[str, object] = {}
        self.records: Dict[Family, list] = {family: [] for family in Family}
        self.counts: Dict[str, int] = {}

    def run(self) -> ValidationResult:
        # no single-dashed options are used
        for name in self.store.single_names():
            self.unknown.extend('-' + name for _ in self.store.occurrences(name, SINGLE_DASH))

        handlers = {
            OptionKind.HELP: self._help,
            OptionKind.FLAG: self._flag,
            OptionKind.VALUE: self._value,
            OptionKind.FAMILY: self._family,
        }
        for name in self.store.double_names():
            occurrences = self.store.occurrences(name)
            descriptor = lookup(name)
            if descriptor is None:
                self.unknown.extend('--' + name for _ in occurrences)
                continue
            handlers[descriptor.kind](descriptor, occurrences)

        top_level = self.store.top_level_arguments()
        valid = not self.unknown and not self.errors and not top_level

        counts = {}
        for family, (set_opt, add_opt) in FAMILY_OPTIONS.items():
            count = FamilyCount(self.counts.get(set_opt.name, 0), self.counts.get(add_opt.name, 0))
            counts[family] = count
            if count.conflicting:
                self._error(ErrorKind.MUTUAL_EXCLUSION_VIOLATION,
                            f"{set_opt.option} and {add_opt.option} options can't both be specified")
                valid = False

        return ValidationResult(
            valid=valid,
            help=bool(self.scalars.get('help')) or self.store.exists('help'),
            unknown_options=tuple(self.unknown),
            errors=tuple(self.errors),
            top_level_arguments=top_level,
            autoconfigure=bool(self.scalars.get('autoconfigure')),
            is_configured=bool(self.scalars.get('is-configured')),
            system=bool(self.scalars.get('system')),
            local=self.scalars.get('local'),
            mode=self.scalars.get('mode'),
            monitors=tuple(self.records[Family.MONITOR]),
            listens=tuple(self.records[Family.LISTEN]),
            devices=tuple(self.records[Family.DEVICE]),
            counts=counts,
        )

    def _error(self, kind: ErrorKind, message: str, hint: Optional[str] = None) -> None:
        logger.debug('option error (%s): %s', kind.value, message)
        self.errors.append(OptionError(kind, message, hint))

    def _duplicates(self, d: OptionDescriptor, occurrences: Tuple[OptionOccurrence, ...]) -> None:
        for _ in occurrences[1:]:
            self._error(ErrorKind.DUPLICATE_SCALAR_OPTION, f'{d.option} option specified more than once')

    def _help(self, d: OptionDescriptor, occurrences: Tuple[OptionOccurrence, ...]) -> None:
        self.scalars[d.name] = True

    def _flag(self, d: OptionDescriptor, occurrences: Tuple[OptionOccurrence, ...]) -> None:
        self.scalars[d.name] = True
        self._duplicates(d, occurrences)
        for occurrence in occurrences:
            if occurrence.arguments:
                self._error(ErrorKind.ARITY_MISMATCH, f'{d.option} option takes no arguments')

    def _value(self, d: OptionDescriptor, occurrences: Tuple[OptionOccurrence, ...]) -> None:
        self._duplicates(d, occurrences)
        args = occurrences[0].arguments
        if self.store.mode(d.name) != OptionMode.SETTER:
            self._error(ErrorKind.MISSING_ARGUMENT, f'{d.option} option requires an argument')
        elif len(args) > d.max_args:
            self._error(ErrorKind.ARITY_MISMATCH, f'Only one {d.metavar} may be specified with the {d.option} option')
        elif d.choices is not None and args[0] not in d.choices:
            self._error(ErrorKind.INVALID_ENUM_VALUE, f'Unknown NUT {d.name}: "{args[0]}"')
        else:
            self.scalars[d.name] = args[0]

    def _family(self, d: OptionDescriptor, occurrences: Tuple[OptionOccurrence, ...]) -> None:
        for occurrence in occurrences:
            self.counts[d.name] = self.counts.get(d.name, 0) + 1
            args = occurrence.arguments
            if self.store.mode(d.name, occurrence.ordinal) != OptionMode.SETTER:
                self._error(ErrorKind.MISSING_ARGUMENT, f'{d.option} option requires arguments')
            elif d.min_args == d.max_args and len(args) != d.min_args:
                self._error(ErrorKind.ARITY_MISMATCH, f'{d.option} option requires exactly {d.min_args} arguments')
            elif len(args) < d.min_args:
                self._error(ErrorKind.ARITY_MISMATCH, f'{d.option} option requires at least {d.min_args} arguments')
            elif len(args) > d.max_args:
                self._error(ErrorKind.ARITY_MISMATCH, f'{d.option} option takes at most {d.max_args} arguments',
                            d.overflow_hint)
            else:
                self.records[d.family].append(_BUILDERS[d.family](args))


def validate(store: ArgumentStore) -> ValidationResult:
    """Check *store* against the option catalog and build the record specs."""
    return _Validator(store).run()
