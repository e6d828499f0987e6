#!/usr/bin/env python
# tests/test_model.py - Tests for nutconf option validation.
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

import unittest

from parameterized import parameterized

from nutconf.errors import ErrorKind
from nutconf.options.catalog import Family
from nutconf.options.model import DeviceSpec, ListenAddrSpec, MonitorSpec, validate
from nutconf.options.store import ArgumentStore


def check(*argv):
    return validate(ArgumentStore.build(list(argv)))


MONITOR_A = ['a', 'b', 'c', 'd', 'e', 'f']
MONITOR_B = ['g', 'h', 'i', 'j', 'k', 'l']


class ScalarOptionTest(unittest.TestCase):

    def test_nothing(self):
        result = check()
        self.assertTrue(result.valid)
        self.assertFalse(result.help)
        self.assertIsNone(result.mode)
        self.assertEqual((), result.monitors)

    def test_flags(self):
        result = check('--autoconfigure', '--is-configured', '--system')
        self.assertTrue(result.valid)
        self.assertTrue(result.autoconfigure)
        self.assertTrue(result.is_configured)
        self.assertTrue(result.system)

    @parameterized.expand([('autoconfigure',), ('is-configured',), ('system',), ('local',), ('mode',)])
    def test_specified_more_than_once(self, name):
        args = ['standalone'] if name in ('local', 'mode') else []
        result = check(f'--{name}', *args, f'--{name}', *args)
        self.assertFalse(result.valid)
        self.assertEqual([ErrorKind.DUPLICATE_SCALAR_OPTION], [e.kind for e in result.errors])
        self.assertIn(f'--{name}', result.errors[0].message)

    @parameterized.expand([('autoconfigure',), ('is-configured',), ('system',)])
    def test_flag_takes_no_arguments(self, name):
        result = check(f'--{name}', '/etc/other')
        self.assertFalse(result.valid)
        self.assertEqual([ErrorKind.ARITY_MISMATCH], [e.kind for e in result.errors])
        self.assertEqual(f'--{name} option takes no arguments', result.errors[0].message)
        self.assertEqual((), result.top_level_arguments)

    def test_flag_arguments_reported_per_occurrence(self):
        result = check('--system', 'a', '--system', 'b')
        self.assertEqual(
            [ErrorKind.DUPLICATE_SCALAR_OPTION, ErrorKind.ARITY_MISMATCH, ErrorKind.ARITY_MISMATCH],
            [e.kind for e in result.errors])

    def test_local(self):
        result = check('--local', '/etc/ups')
        self.assertTrue(result.valid)
        self.assertEqual('/etc/ups', result.local)

    @parameterized.expand([('local',), ('mode',)])
    def test_requires_an_argument(self, name):
        result = check(f'--{name}')
        self.assertFalse(result.valid)
        self.assertEqual(ErrorKind.MISSING_ARGUMENT, result.errors[0].kind)
        self.assertEqual(f'--{name} option requires an argument', result.errors[0].message)

    def test_local_takes_one_directory(self):
        result = check('--local', 'a', 'b')
        self.assertFalse(result.valid)
        self.assertEqual(ErrorKind.ARITY_MISMATCH, result.errors[0].kind)
        self.assertIsNone(result.local)

    @parameterized.expand([
        ('standalone',), ('netserver',), ('netclient',), ('controlled',), ('manual',), ('none',),
    ])
    def test_known_modes(self, mode):
        result = check('--mode', mode)
        self.assertTrue(result.valid)
        self.assertEqual(mode, result.mode)

    def test_unknown_mode(self):
        result = check('--mode', 'bogus')
        self.assertFalse(result.valid)
        self.assertEqual(ErrorKind.INVALID_ENUM_VALUE, result.errors[0].kind)
        self.assertIn('"bogus"', result.errors[0].message)
        self.assertIsNone(result.mode)

    def test_help_is_not_an_error(self):
        result = check('--help')
        self.assertTrue(result.help)
        self.assertTrue(result.valid)

    def test_single_dash_help(self):
        result = check('-help')
        self.assertTrue(result.help)
        # -help is still unknown, help is handled before validity
        self.assertEqual(('-help',), result.unknown_options)


class UnknownOptionTest(unittest.TestCase):

    def test_unknown_options_are_collected(self):
        result = check('-x', '--frobnicate', '1', '--mode', 'standalone', '--frobnicate', '-x')
        self.assertFalse(result.valid)
        self.assertEqual(('-x', '-x', '--frobnicate', '--frobnicate'), result.unknown_options)
        self.assertEqual((), result.errors)
        self.assertEqual('standalone', result.mode)

    def test_stray_arguments(self):
        result = check('stray', '--system')
        self.assertFalse(result.valid)
        self.assertEqual(('stray',), result.top_level_arguments)
        self.assertEqual((), result.errors)

    def test_arguments_after_separator_are_stray(self):
        result = check('--local', '/tmp', '--', 'extra')
        self.assertFalse(result.valid)
        self.assertEqual('/tmp', result.local)
        self.assertEqual(('extra',), result.top_level_arguments)


class MonitorFamilyTest(unittest.TestCase):

    def test_two_monitors_in_order(self):
        result = check('--set-monitor', *MONITOR_A, '--set-monitor', *MONITOR_B)
        self.assertTrue(result.valid)
        self.assertEqual((MonitorSpec(*MONITOR_A), MonitorSpec(*MONITOR_B)), result.monitors)
        self.assertEqual('a', result.monitors[0].ups_id)
        self.assertEqual('f', result.monitors[0].role)
        self.assertFalse(result.keep_existing_monitors)

    def test_add_monitor_keeps_existing(self):
        result = check('--add-monitor', *MONITOR_A)
        self.assertTrue(result.valid)
        self.assertTrue(result.keep_existing_monitors)
        self.assertEqual(1, result.counts[Family.MONITOR].add)

    @parameterized.expand([
        ('master', True),
        ('slave', False),
        ('MASTER', False),
        ('primary', False),
    ])
    def test_role(self, role, is_master):
        result = check('--set-monitor', 'ups', 'host', '1', 'user', 'pass', role)
        self.assertTrue(result.valid)
        self.assertEqual(is_master, result.monitors[0].is_master)

    def test_wrong_count_does_not_stop_processing(self):
        result = check(
            '--set-monitor', 'a', 'b', 'c',
            '--set-monitor', *MONITOR_B,
            '--set-monitor',
            '--set-monitor', *MONITOR_A, 'extra',
        )
        self.assertFalse(result.valid)
        self.assertEqual(
            [ErrorKind.ARITY_MISMATCH, ErrorKind.MISSING_ARGUMENT, ErrorKind.ARITY_MISMATCH],
            [e.kind for e in result.errors])
        self.assertEqual((MonitorSpec(*MONITOR_B),), result.monitors)
        self.assertEqual(4, result.counts[Family.MONITOR].set)

    def test_set_and_add_are_mutually_exclusive(self):
        result = check('--set-monitor', 'a', 'b', 'c', '--add-monitor', 'x', 'y', 'z', 'p', 'q', 'r')
        self.assertFalse(result.valid)
        kinds = [e.kind for e in result.errors]
        self.assertIn(ErrorKind.MUTUAL_EXCLUSION_VIOLATION, kinds)
        self.assertIn("--set-monitor and --add-monitor options can't both be specified",
                      result.error_messages)

    def test_mutual_exclusion_of_valid_occurrences(self):
        result = check('--add-monitor', *MONITOR_A, '--set-monitor', *MONITOR_B)
        self.assertFalse(result.valid)
        self.assertEqual([ErrorKind.MUTUAL_EXCLUSION_VIOLATION], [e.kind for e in result.errors])


class ListenFamilyTest(unittest.TestCase):

    def test_address_and_port(self):
        result = check('--set-listen', '127.0.0.1', '3493', '--set-listen', '::1')
        self.assertTrue(result.valid)
        self.assertEqual(
            (ListenAddrSpec('127.0.0.1', '3493'), ListenAddrSpec('::1', None)),
            result.listens)
        self.assertFalse(result.keep_existing_listens)

    def test_add_listen(self):
        result = check('--add-listen', '0.0.0.0')
        self.assertTrue(result.valid)
        self.assertTrue(result.keep_existing_listens)

    @parameterized.expand([
        ('getter', [], ErrorKind.MISSING_ARGUMENT),
        ('too_many', ['a', '1', 'x'], ErrorKind.ARITY_MISMATCH),
    ])
    def test_bad_listen(self, _, args, kind):
        result = check('--set-listen', *args)
        self.assertFalse(result.valid)
        self.assertEqual([kind], [e.kind for e in result.errors])
        self.assertEqual((), result.listens)

    def test_set_and_add_are_mutually_exclusive(self):
        result = check('--set-listen', 'a', '--add-listen', 'b')
        self.assertFalse(result.valid)
        self.assertEqual([ErrorKind.MUTUAL_EXCLUSION_VIOLATION], [e.kind for e in result.errors])


class DeviceFamilyTest(unittest.TestCase):

    def test_devices(self):
        result = check(
            '--set-device', 'ups1', 'usbhid-ups', 'auto',
            '--set-device', 'ups2', 'blazer_ser', '/dev/ttyS0', 'Server room UPS',
        )
        self.assertTrue(result.valid)
        self.assertEqual((
            DeviceSpec('ups1', 'usbhid-ups', 'auto'),
            DeviceSpec('ups2', 'blazer_ser', '/dev/ttyS0', 'Server room UPS'),
        ), result.devices)
        self.assertFalse(result.keep_existing_devices)

    def test_too_few(self):
        result = check('--add-device', 'ups1', 'usbhid-ups')
        self.assertFalse(result.valid)
        self.assertEqual(ErrorKind.ARITY_MISMATCH, result.errors[0].kind)
        self.assertIn('at least 3', result.errors[0].message)
        self.assertIsNone(result.errors[0].hint)

    def test_too_many_hints_at_quoting(self):
        result = check('--set-device', 'ups1', 'usbhid-ups', 'auto', 'Server', 'room')
        self.assertFalse(result.valid)
        self.assertEqual(ErrorKind.ARITY_MISMATCH, result.errors[0].kind)
        self.assertIn('at most 4', result.errors[0].message)
        self.assertIn('quote', result.errors[0].hint)

    def test_all_families_reported(self):
        result = check(
            '--set-device', 'a', 'b', 'c', '--add-device', 'd', 'e', 'f',
            '--set-listen', 'a', '--add-listen', 'b',
            '--set-monitor', *MONITOR_A, '--add-monitor', *MONITOR_B,
        )
        self.assertFalse(result.valid)
        self.assertEqual(3, len(result.errors))
        self.assertTrue(all(e.kind == ErrorKind.MUTUAL_EXCLUSION_VIOLATION for e in result.errors))


if __name__ == '__main__':
    unittest.main()
