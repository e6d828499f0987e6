#!/usr/bin/env python
# nutconf/configuration/files.py - Read and write configuration documents
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

import logging
from pathlib import Path
from typing import Union

from nutconf.common import NUT_CONF
from nutconf.configuration.documents import ConfigDocument, NutConfiguration
from nutconf.errors import ConfigDirectoryError, ConfigParseError, ConfigWriteError

__all__ = ['check_directory', 'source', 'store', 'is_configured']

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def check_directory(etc: PathLike) -> Path:
    """Return *etc* as a Path, raising if the directory isn't there."""
    path = Path(etc)
    if not path.is_dir():
        raise ConfigDirectoryError(etc)
    return path


def source(document: ConfigDocument, path: PathLike) -> bool:
    """Load *document* from *path* if the file exists.

    :return: True if the file was read, False if it doesn't exist
    :raises ConfigParseError: the file exists but can't be parsed
    """
    path = Path(path)
    if not path.exists():
        logger.debug('%s does not exist, starting empty', path)
        return False

    try:
        with path.open('r', encoding='utf-8') as fh:
            parsed_ok = document.parse_from(fh)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(path, str(e)) from e

    if not parsed_ok:
        raise ConfigParseError(path)
    logger.debug('sourced %s', path)
    return True


def store(document: ConfigDocument, path: PathLike) -> None:
    """Write *document* to *path*, replacing the file.

    :raises ConfigWriteError: the file can't be written
    """
    path = Path(path)
    try:
        with path.open('w', encoding='utf-8') as fh:
            written_ok = document.write_to(fh)
    except OSError as e:
        raise ConfigWriteError(path, str(e)) from e

    if not written_ok:
        raise ConfigWriteError(path)
    logger.info('wrote %s', path)


def is_configured(etc: PathLike) -> bool:
    """True iff nut.conf exists and sets a mode other than "none"."""
    conf = NutConfiguration()
    try:
        if not source(conf, Path(etc) / NUT_CONF):
            return False
    except ConfigParseError as e:
        logger.warning('%s; treating NUT as not configured', e)
        return False
    return conf.is_configured()
