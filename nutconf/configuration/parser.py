#!/usr/bin/env python
# nutconf/configuration/parser.py - Line tokenizer for NUT configuration files
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
"""Tokenizer shared by every NUT configuration file.

A line is split on whitespace. ``"..."`` groups a token (with ``\\``
escapes inside and outside quotes), ``#`` outside quotes starts a comment
and ``=`` is always a token of its own.
"""
from __future__ import annotations

from typing import List, Optional

from nutconf.errors import ConfigSyntaxError

__all__ = ['tokenize', 'quote', 'section_name']

_SPECIAL = set(' \t"#=\\[]')


def tokenize(line: str, line_no: int = 0) -> List[str]:
    tokens: List[str] = []
    buf: List[str] = []
    in_token = False
    quoted = False

    def flush():
        nonlocal in_token
        if in_token:
            tokens.append(''.join(buf))
            buf.clear()
            in_token = False

    chars = iter(line.rstrip('\r\n'))
    for c in chars:
        if c == '\\':
            escaped = next(chars, None)
            if escaped is None:
                raise ConfigSyntaxError(line_no, 'dangling escape at end of line')
            buf.append(escaped)
            in_token = True
        elif quoted:
            if c == '"':
                quoted = False
            else:
                buf.append(c)
        elif c == '"':
            quoted = True
            in_token = True
        elif c == '#':
            break
        elif c.isspace():
            flush()
        elif c == '=':
            flush()
            tokens.append('=')
        else:
            buf.append(c)
            in_token = True

    if quoted:
        raise ConfigSyntaxError(line_no, 'unterminated quoted string')
    flush()
    return tokens


def quote(value: str) -> str:
    """Quote *value* so that :func:`tokenize` reads it back as one token."""
    if value and not any(c in _SPECIAL or c.isspace() for c in value):
        return value
    escaped = value.replace('\\', '\\\\').replace('"', '\\"')
    return f'"{escaped}"'


def section_name(tokens: List[str]) -> Optional[str]:
    """Name of a ``[name]`` header line, or None if *tokens* isn't one."""
    if len(tokens) == 1 and len(tokens[0]) >= 2 and tokens[0][0] == '[' and tokens[0][-1] == ']':
        return tokens[0][1:-1]
    return None
