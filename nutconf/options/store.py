#!/usr/bin/env python
# nutconf/options/store.py - Ordered multi-valued command line option store
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
"""Raw command line tokenizer.

:class:`ArgumentStore` splits an argument vector into option occurrences,
each one keeping the arguments that followed it, without knowing anything
about which options exist. The same option may appear many times; every
appearance is a separate :class:`OptionOccurrence`, looked up by its ordinal.

Token rules:

* ``-x`` starts a single-dashed option ``x``
* ``--name`` starts a double-dashed option ``name``
* ``--`` alone ends the current option; what follows belongs to the binary
* ``""``, ``-`` and anything with three or more leading dashes are plain
  arguments of the current option (or of the binary)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

__all__ = ['OptionOccurrence', 'OptionMode', 'ArgumentStore', 'SINGLE_DASH', 'DOUBLE_DASH']

logger = logging.getLogger(__name__)

SINGLE_DASH = 1
DOUBLE_DASH = 2


@dataclass(frozen=True)
class OptionOccurrence:
    name: str
    ordinal: int
    arguments: Tuple[str, ...] = ()


class OptionMode(Enum):
    """Getter/setter duality of an option occurrence."""
    NOT_SPECIFIED = 0
    GETTER = 1
    SETTER = 2


class ArgumentStore:
    """Immutable, ordered store of option occurrences built from argv."""

    def __init__(self,
                 single: Dict[str, List[OptionOccurrence]],
                 double: Dict[str, List[OptionOccurrence]],
                 arguments: Sequence[str]):
        self._maps = {SINGLE_DASH: single, DOUBLE_DASH: double}
        self._arguments = tuple(arguments)

    @classmethod
    def build(cls, tokens: Iterable[str]) -> 'ArgumentStore':
        """Tokenize *tokens* (argv without the program name)."""
        maps: Dict[int, Dict[str, List[list]]] = {SINGLE_DASH: {}, DOUBLE_DASH: {}}
        top_level: List[str] = []
        current: Optional[List[str]] = None

        def start(dashes: int, name: str) -> List[str]:
            args: List[str] = []
            maps[dashes].setdefault(name, []).append(args)
            return args

        for token in tokens:
            if len(token) < 2 or token[0] != '-':
                (top_level if current is None else current).append(token)
            elif token[1] != '-':
                current = start(SINGLE_DASH, token[1:])
            elif len(token) == 2:
                current = None
            elif token[2] != '-':
                current = start(DOUBLE_DASH, token[2:])
            else:
                (top_level if current is None else current).append(token)

        def freeze(raw: Dict[str, List[list]]) -> Dict[str, List[OptionOccurrence]]:
            return {
                name: [OptionOccurrence(name, i, tuple(args)) for i, args in enumerate(seen)]
                for name, seen in raw.items()
            }

        store = cls(freeze(maps[SINGLE_DASH]), freeze(maps[DOUBLE_DASH]), top_level)
        if logger.isEnabledFor(logging.DEBUG):
            store.dump()
        return store

    def occurrences(self, name: str, dashes: int = DOUBLE_DASH) -> Tuple[OptionOccurrence, ...]:
        return tuple(self._maps[dashes].get(name, ()))

    def count(self, name: str, dashes: int = DOUBLE_DASH) -> int:
        return len(self._maps[dashes].get(name, ()))

    def exists(self, name: str) -> bool:
        """True if *name* was given with either prefix."""
        return self.count(name, SINGLE_DASH) + self.count(name, DOUBLE_DASH) > 0

    def occurrence(self, name: str, ordinal: int = 0,
                   dashes: int = DOUBLE_DASH) -> Optional[Tuple[str, ...]]:
        """Arguments of the *ordinal*-th occurrence of *name*, or None."""
        seen = self._maps[dashes].get(name)
        if not seen or not 0 <= ordinal < len(seen):
            return None
        return seen[ordinal].arguments

    def mode(self, name: str, ordinal: int = 0) -> OptionMode:
        args = self.occurrence(name, ordinal)
        if args is None:
            return OptionMode.NOT_SPECIFIED
        return OptionMode.SETTER if args else OptionMode.GETTER

    def single_names(self) -> List[str]:
        return list(self._maps[SINGLE_DASH])

    def double_names(self) -> List[str]:
        return list(self._maps[DOUBLE_DASH])

    def all_names(self) -> List[str]:
        return self.single_names() + self.double_names()

    def top_level_arguments(self) -> Tuple[str, ...]:
        return self._arguments

    def dump(self) -> None:
        """Log every occurrence, for debugging."""
        logger.debug('----- Options dump begin -----')
        for dashes, prefix in ((SINGLE_DASH, '-'), (DOUBLE_DASH, '--')):
            for name, seen in self._maps[dashes].items():
                for occ in seen:
                    logger.debug('%s%s[%d] %s', prefix, name, occ.ordinal, ' '.join(occ.arguments))
        logger.debug('-- %s', ' '.join(self._arguments))
        logger.debug('----- Options dump end -----')

    def __repr__(self):
        return (f'ArgumentStore(single={self.single_names()!r}, '
                f'double={self.double_names()!r}, arguments={list(self._arguments)!r})')
