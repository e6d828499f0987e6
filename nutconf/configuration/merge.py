#!/usr/bin/env python
# nutconf/configuration/merge.py - Merge new records into existing configuration
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
"""Merge policies.

Monitors and listen addresses are plain lists: ``--set-*`` replaces them,
``--add-*`` appends. Devices are keyed by id: ``--set-device`` drops every
device section first, then both variants upsert driver, port and description
for each given device. The global ups.conf section is never dropped.

None of these functions mutate their inputs.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, TypeVar

from nutconf.configuration.documents import (
    GLOBAL_SECTION, UpsConfiguration, UpsdConfiguration, UpsmonConfiguration,
)
from nutconf.configuration.records import Listen, Monitor
from nutconf.options.model import DeviceSpec

__all__ = ['merge_list', 'merge_devices', 'set_monitors', 'set_listens', 'set_devices']

logger = logging.getLogger(__name__)

T = TypeVar('T')

Sections = Dict[str, Dict[str, Optional[str]]]


def merge_list(existing: Iterable[T], new: Iterable[T], keep_existing: bool) -> List[T]:
    """New entries after the existing ones, or instead of them."""
    merged = list(existing) if keep_existing else []
    merged.extend(new)
    return merged


def merge_devices(sections: Sections, devices: Sequence[DeviceSpec], keep_existing: bool) -> Sections:
    """Upsert *devices* into ups.conf *sections*, keyed by device id."""
    merged = UpsConfiguration()
    merged.sections = {GLOBAL_SECTION: dict(sections.get(GLOBAL_SECTION, {}))}
    if keep_existing:
        merged.sections.update(
            (name, dict(entries)) for name, entries in sections.items() if name != GLOBAL_SECTION)

    for device in devices:
        merged.set_driver(device.id, device.driver)
        merged.set_port(device.id, device.port)
        if device.description:
            merged.set_description(device.id, device.description)
    return merged.sections


def set_monitors(conf: UpsmonConfiguration, monitors: Sequence[Monitor], keep_existing: bool = False) -> None:
    logger.info('%s %d monitor(s)', 'adding' if keep_existing else 'setting', len(monitors))
    conf.monitors = merge_list(conf.monitors, monitors, keep_existing)


def set_listens(conf: UpsdConfiguration, listens: Sequence[Listen], keep_existing: bool = False) -> None:
    logger.info('%s %d listen address(es)', 'adding' if keep_existing else 'setting', len(listens))
    conf.listens = merge_list(conf.listens, listens, keep_existing)


def set_devices(conf: UpsConfiguration, devices: Sequence[DeviceSpec], keep_existing: bool = False) -> None:
    logger.info('%s %d device(s)', 'adding' if keep_existing else 'setting', len(devices))
    conf.sections = merge_devices(conf.sections, devices, keep_existing)
