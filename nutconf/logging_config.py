#!/usr/bin/env python
# nutconf/logging_config.py - Centralized logging configuration for nutconf
#
# This library is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
"""
Centralized logging configuration for nutconf.

Diagnostics go through :mod:`logging`; the level is taken from the
NUTCONF_VERBOSITY environment variable. Messages meant for the operator
(usage, option reports, ``Error: ...`` lines) are printed by the tool and
do not depend on this configuration.
"""

import logging
import os
import sys

VERBOSITY_ENV = 'NUTCONF_VERBOSITY'

# Valid log levels
VALID_LOG_LEVELS = {
    'CRITICAL': logging.CRITICAL,
    'ERROR': logging.ERROR,
    'WARNING': logging.WARNING,
    'INFO': logging.INFO,
    'DEBUG': logging.DEBUG
}


def configure_logging(logger_name='nutconf', default_level='WARNING'):
    """
    Configure logging for nutconf.

    :param logger_name: Name of the logger to configure (default: 'nutconf')
    :param default_level: Level used when NUTCONF_VERBOSITY is unset or invalid
    :return: Configured logger instance
    """
    verbosity = os.environ.get(VERBOSITY_ENV, default_level).upper()

    if verbosity not in VALID_LOG_LEVELS:
        print(f"Warning: Invalid {VERBOSITY_ENV} '{verbosity}', using '{default_level}'",
              file=sys.stderr)
        verbosity = default_level

    logger = logging.getLogger(logger_name)
    logger.setLevel(VALID_LOG_LEVELS[verbosity])

    # Only add handler if logger doesn't have handlers already
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(VALID_LOG_LEVELS[verbosity])
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        # our handler is the only one that should print these records
        logger.propagate = False

    return logger
