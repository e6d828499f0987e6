#!/usr/bin/env python3
# nutconf/tool/main.py - nutconf entry point
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

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from nutconf.common import (
    ExitCode, NUT_CONF, UPS_CONF, UPSD_CONF, UPSMON_CONF, default_confpath,
)
from nutconf.configuration.documents import (
    NutConfiguration, UpsConfiguration, UpsdConfiguration, UpsmonConfiguration,
)
from nutconf.configuration.files import check_directory, is_configured, source, store
from nutconf.configuration.merge import set_devices, set_listens, set_monitors
from nutconf.configuration.records import materialize
from nutconf.errors import NutconfError
from nutconf.logging_config import configure_logging
from nutconf.options.model import ValidationResult, validate
from nutconf.options.store import ArgumentStore
from nutconf.tool.cli import error_kinds, print_usage, report_invalid

logger = logging.getLogger(__name__)


def apply(result: ValidationResult, etc: Path) -> None:
    """Write every requested change below the configuration directory *etc*."""
    # all records are parsed before any file is touched
    records = materialize(result)

    if records.monitors:
        upsmon_conf = UpsmonConfiguration()
        source(upsmon_conf, etc / UPSMON_CONF)
        set_monitors(upsmon_conf, records.monitors, result.keep_existing_monitors)
        store(upsmon_conf, etc / UPSMON_CONF)

    if records.listens:
        upsd_conf = UpsdConfiguration()
        source(upsd_conf, etc / UPSD_CONF)
        set_listens(upsd_conf, records.listens, result.keep_existing_listens)
        store(upsd_conf, etc / UPSD_CONF)

    if result.devices:
        ups_conf = UpsConfiguration()
        source(ups_conf, etc / UPS_CONF)
        set_devices(ups_conf, result.devices, result.keep_existing_devices)
        store(ups_conf, etc / UPS_CONF)

    if result.mode:
        nut_conf = NutConfiguration()
        source(nut_conf, etc / NUT_CONF)
        nut_conf.mode = result.mode
        store(nut_conf, etc / NUT_CONF)


def run(argv: Optional[List[str]] = None, prog: str = 'nutconf') -> int:
    """Run nutconf on *argv* (without the program name) and return the exit code.

    Failures that abort the run are raised as NutconfError.
    """
    if argv is None:
        argv = sys.argv[1:]

    result = validate(ArgumentStore.build(argv))

    if result.help:
        print_usage(prog)
        return ExitCode.OK

    if not result.valid:
        logger.debug('invalid options: %s', ', '.join(k.value for k in error_kinds(result)))
        report_invalid(result)
        print_usage(prog)
        return ExitCode.FAILURE

    etc = check_directory(result.local or default_confpath())

    if result.is_configured:
        configured = is_configured(etc)
        print('true' if configured else 'false')
        return ExitCode.OK if configured else ExitCode.FAILURE

    if result.autoconfigure:
        logger.warning('--autoconfigure is not supported yet, ignoring it')

    apply(result, etc)
    return ExitCode.OK


def main():
    configure_logging('nutconf')
    prog = os.path.basename(sys.argv[0]) or 'nutconf'
    try:
        code = run(sys.argv[1:], prog)
    except NutconfError as e:
        print(f'Error: {e}', file=sys.stderr)
        code = ExitCode.FAILURE
    except Exception as e:
        logger.critical('Unhandled exception: %s', e, exc_info=True)
        code = ExitCode.INTERNAL_ERROR
    sys.exit(int(code))


if __name__ == '__main__':
    main()
