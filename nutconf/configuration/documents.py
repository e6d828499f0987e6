#!/usr/bin/env python
# nutconf/configuration/documents.py - NUT configuration file models
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
In-memory models of the files nutconf edits.

Every document knows how to read itself from a text stream
(:meth:`ConfigDocument.parse_from`) and write itself back
(:meth:`ConfigDocument.write_to`). Directives nutconf doesn't manage are
kept in order and written back unchanged. Whole-line comments are kept as
:class:`Comment` lines; a comment trailing a directive is dropped.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, TextIO, Tuple, Union

from nutconf.common import NutMode
from nutconf.configuration.parser import quote, section_name, tokenize
from nutconf.configuration.records import Listen, Monitor
from nutconf.errors import ConfigSyntaxError

__all__ = [
    'ConfigDocument', 'Comment', 'NutConfiguration', 'UpsmonConfiguration',
    'UpsdConfiguration', 'UpsConfiguration', 'GLOBAL_SECTION',
]

logger = logging.getLogger(__name__)

# name of the section holding ups.conf directives that precede any [header]
GLOBAL_SECTION = ''

Directive = Tuple[str, ...]


class Comment(str):
    """A comment line, written back verbatim."""


class ConfigDocument(ABC):
    """A configuration file that can be parsed from and written to a stream."""

    def parse_from(self, stream: Iterable[str]) -> bool:
        """Replace the content of this document with *stream*.

        :return: False if the stream is not a valid document
        """
        self.clear()
        try:
            for line_no, line in enumerate(stream, start=1):
                text = line.strip()
                if text.startswith('#'):
                    self._comment(Comment(text))
                    continue
                tokens = tokenize(line, line_no)
                if tokens:
                    self._parse_tokens(line_no, tokens)
        except ConfigSyntaxError as e:
            logger.error('%s: %s', type(self).__name__, e)
            return False
        return True

    def write_to(self, stream: TextIO) -> bool:
        try:
            for line in self.render():
                stream.write(line + '\n')
        except OSError as e:
            logger.error('%s: write failed: %s', type(self).__name__, e)
            return False
        return True

    @abstractmethod
    def clear(self) -> None:
        """Forget everything parsed so far."""

    @abstractmethod
    def render(self) -> List[str]:
        """Lines of the serialized document, without line terminators."""

    @abstractmethod
    def _parse_tokens(self, line_no: int, tokens: List[str]) -> None:
        pass

    @abstractmethod
    def _comment(self, comment: Comment) -> None:
        pass


def _line(*tokens: str) -> str:
    # a lone "=" separates a key from its value, keep it bare
    return ' '.join(t if t == '=' else quote(t) for t in tokens)


class _DirectiveDocument(ConfigDocument):
    """``KEYWORD arg...`` file with one managed, repeatable keyword.

    Managed lines are written after every other directive and comment.
    """

    keyword = ''

    def __init__(self):
        self.directives: List[Union[Directive, Comment]] = []
        self._entries: list = []

    def clear(self) -> None:
        self.directives = []
        self._entries = []

    def _comment(self, comment: Comment) -> None:
        self.directives.append(comment)

    def _parse_tokens(self, line_no: int, tokens: List[str]) -> None:
        if tokens[0].upper() != self.keyword:
            self.directives.append(tuple(tokens))
            return
        try:
            self._entries.append(self._entry(tokens[1:]))
        except ValueError as e:
            raise ConfigSyntaxError(line_no, str(e)) from e

    @abstractmethod
    def _entry(self, args: List[str]):
        """Build the record of one managed line from its arguments."""

    def render(self) -> List[str]:
        lines = [d if isinstance(d, Comment) else _line(*d) for d in self.directives]
        lines.extend(_line(self.keyword, *entry.arguments()) for entry in self._entries)
        return lines


class UpsmonConfiguration(_DirectiveDocument):
    """upsmon.conf; manages MONITOR lines."""

    keyword = 'MONITOR'

    @property
    def monitors(self) -> List[Monitor]:
        return list(self._entries)

    @monitors.setter
    def monitors(self, monitors: Iterable[Monitor]) -> None:
        self._entries = list(monitors)

    def _entry(self, args: List[str]) -> Monitor:
        return Monitor.from_arguments(args)


class UpsdConfiguration(_DirectiveDocument):
    """upsd.conf; manages LISTEN lines."""

    keyword = 'LISTEN'

    @property
    def listens(self) -> List[Listen]:
        return list(self._entries)

    @listens.setter
    def listens(self, listens: Iterable[Listen]) -> None:
        self._entries = list(listens)

    def _entry(self, args: List[str]) -> Listen:
        return Listen.from_arguments(args)


class NutConfiguration(ConfigDocument):
    """nut.conf: shell-style ``KEY=value`` assignments."""

    def __init__(self):
        self.values: Dict[str, str] = {}
        # comments and keys in file order
        self._layout: List[str] = []

    def clear(self) -> None:
        self.values = {}
        self._layout = []

    def _comment(self, comment: Comment) -> None:
        self._layout.append(comment)

    def _parse_tokens(self, line_no: int, tokens: List[str]) -> None:
        if len(tokens) not in (2, 3) or tokens[1] != '=':
            raise ConfigSyntaxError(line_no, 'expected KEY=value')
        self.values[tokens[0]] = tokens[2] if len(tokens) == 3 else ''
        self._layout.append(tokens[0])

    def render(self) -> List[str]:
        lines: List[str] = []
        written = set()
        for item in self._layout:
            if isinstance(item, Comment):
                lines.append(item)
            elif item in self.values and item not in written:
                lines.append(f'{item}={quote(self.values[item])}')
                written.add(item)
        lines.extend(f'{key}={quote(value)}' for key, value in self.values.items() if key not in written)
        return lines

    @property
    def mode(self) -> Optional[NutMode]:
        """Configured mode, None when missing or not a known mode."""
        try:
            return NutMode(self.values.get('MODE', '').strip().lower())
        except ValueError:
            return None

    @mode.setter
    def mode(self, mode) -> None:
        self.values['MODE'] = NutMode(mode).value

    def is_configured(self) -> bool:
        return self.mode not in (None, NutMode.NONE)


class UpsConfiguration(ConfigDocument):
    """ups.conf: global directives followed by one ``[id]`` section per device.

    A section maps keys to values; a bare flag key maps to None. Comment
    lines are attached to the header or key that follows them and go away
    with it.
    """

    def __init__(self):
        self.sections: Dict[str, Dict[str, Optional[str]]] = {GLOBAL_SECTION: {}}
        # (section, key) -> preceding comments; key None is the [section] header
        self.comments: Dict[Tuple[str, Optional[str]], List[Comment]] = {}
        self.trailing_comments: List[Comment] = []
        self._current = GLOBAL_SECTION

    def clear(self) -> None:
        self.sections = {GLOBAL_SECTION: {}}
        self.comments = {}
        self.trailing_comments = []
        self._current = GLOBAL_SECTION

    def _comment(self, comment: Comment) -> None:
        self.trailing_comments.append(comment)

    def _attach_comments(self, section: str, key: Optional[str]) -> None:
        if self.trailing_comments:
            self.comments.setdefault((section, key), []).extend(self.trailing_comments)
            self.trailing_comments = []

    def _parse_tokens(self, line_no: int, tokens: List[str]) -> None:
        name = section_name(tokens)
        if name is not None:
            if not name:
                raise ConfigSyntaxError(line_no, 'empty section name')
            self._current = name
            self.sections.setdefault(name, {})
            self._attach_comments(name, None)
            return
        section = self.sections[self._current]
        if len(tokens) == 1 and tokens[0] != '=':
            section[tokens[0]] = None
        elif len(tokens) in (2, 3) and tokens[1] == '=':
            section[tokens[0]] = tokens[2] if len(tokens) == 3 else ''
        else:
            raise ConfigSyntaxError(line_no, 'expected "key = value" or a flag')
        self._attach_comments(self._current, tokens[0])

    def render(self) -> List[str]:
        lines: List[str] = []
        for name, entries in self.sections.items():
            if name != GLOBAL_SECTION:
                if lines:
                    lines.append('')
                lines.extend(self.comments.get((name, None), ()))
                lines.append(f'[{name}]')
            indent = '' if name == GLOBAL_SECTION else '\t'
            for key, value in entries.items():
                lines.extend(indent + c for c in self.comments.get((name, key), ()))
                if value is None:
                    lines.append(indent + quote(key))
                else:
                    lines.append(f'{indent}{quote(key)} = {quote(value)}')
        lines.extend(self.trailing_comments)
        return lines

    def devices(self) -> List[str]:
        return [name for name in self.sections if name != GLOBAL_SECTION]

    def get(self, device: str, key: str) -> Optional[str]:
        return self.sections.get(device, {}).get(key)

    def set_value(self, device: str, key: str, value: str) -> None:
        self.sections.setdefault(device, {})[key] = value

    def set_driver(self, device: str, driver: str) -> None:
        self.set_value(device, 'driver', driver)

    def set_port(self, device: str, port: str) -> None:
        self.set_value(device, 'port', port)

    def set_description(self, device: str, description: str) -> None:
        self.set_value(device, 'desc', description)
