#!/usr/bin/env python
# tests/test_merge.py - Tests for the monitor, listen and device merge policies.
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

import copy
import unittest

from parameterized import parameterized

from nutconf.configuration.documents import (
    GLOBAL_SECTION, UpsConfiguration, UpsdConfiguration, UpsmonConfiguration,
)
from nutconf.configuration.merge import (
    merge_devices, merge_list, set_devices, set_listens, set_monitors,
)
from nutconf.configuration.records import Listen, Monitor
from nutconf.options.model import DeviceSpec


def existing_sections():
    return {
        GLOBAL_SECTION: {'maxretry': '3'},
        'A': {'driver': 'd1', 'port': 'p1', 'desc': 'first'},
        'B': {'driver': 'dB', 'port': 'pB'},
    }


class ListMergeTest(unittest.TestCase):

    @parameterized.expand([
        ('replace', False, ['n1', 'n2']),
        ('append', True, ['e1', 'e2', 'n1', 'n2']),
    ])
    def test_merge_list(self, _, keep_existing, expected):
        existing = ['e1', 'e2']
        self.assertEqual(expected, merge_list(existing, ['n1', 'n2'], keep_existing))
        self.assertEqual(['e1', 'e2'], existing)

    def test_set_monitors(self):
        conf = UpsmonConfiguration()
        old = Monitor('old', 'localhost')
        conf.monitors = [old]
        new = [Monitor('n1', 'host1'), Monitor('n2', 'host2', 3493)]

        set_monitors(conf, new, keep_existing=True)
        self.assertEqual([old] + new, conf.monitors)

        set_monitors(conf, new[:1])
        self.assertEqual(new[:1], conf.monitors)

    def test_set_listens(self):
        conf = UpsdConfiguration()
        conf.listens = [Listen('127.0.0.1')]
        set_listens(conf, [Listen('::1', 3493)], keep_existing=False)
        self.assertEqual([Listen('::1', 3493)], conf.listens)


class DeviceMergeTest(unittest.TestCase):

    def test_upsert_keeping_existing(self):
        sections = existing_sections()
        before = copy.deepcopy(sections)
        merged = merge_devices(sections, [DeviceSpec('A', 'd2', 'p2')], keep_existing=True)

        self.assertEqual(['', 'A', 'B'], list(merged))
        # description survives since the new record has none
        self.assertEqual({'driver': 'd2', 'port': 'p2', 'desc': 'first'}, merged['A'])
        self.assertEqual({'driver': 'dB', 'port': 'pB'}, merged['B'])
        self.assertEqual(before, sections)

    def test_replace_keeps_global_section(self):
        merged = merge_devices(existing_sections(), [DeviceSpec('A', 'd2', 'p2')], keep_existing=False)
        self.assertEqual({
            GLOBAL_SECTION: {'maxretry': '3'},
            'A': {'driver': 'd2', 'port': 'p2'},
        }, merged)

    def test_description(self):
        merged = merge_devices({}, [DeviceSpec('C', 'dummy-ups', 'x.dev', 'New one')], keep_existing=True)
        self.assertEqual({'driver': 'dummy-ups', 'port': 'x.dev', 'desc': 'New one'}, merged['C'])
        self.assertIn(GLOBAL_SECTION, merged)

    @parameterized.expand([('keep', True), ('replace', False)])
    def test_upsert_is_idempotent(self, _, keep_existing):
        devices = [DeviceSpec('A', 'd2', 'p2'), DeviceSpec('Z', 'dz', 'pz', 'zed')]
        once = merge_devices(existing_sections(), devices, keep_existing)
        twice = merge_devices(once, devices, keep_existing=True)
        self.assertEqual(once, twice)

    def test_set_devices(self):
        conf = UpsConfiguration()
        conf.sections = existing_sections()
        set_devices(conf, [DeviceSpec('B', 'new', 'auto')], keep_existing=False)
        self.assertEqual(['B'], conf.devices())
        self.assertEqual('new', conf.get('B', 'driver'))
        self.assertEqual('3', conf.get(GLOBAL_SECTION, 'maxretry'))


if __name__ == '__main__':
    unittest.main()
