"""Persistent high-score table stored as 'name score' lines."""

from __future__ import annotations

import contextlib
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

_log = logging.getLogger(__name__)


@dataclass
class RankingEntry:
    """One line of the ranking table."""

    player_name: str
    score: int


def _parse_entries(text: str) -> Iterator[RankingEntry]:
    tokens = iter(text.split())
    for name in tokens:
        score = next(tokens, None)
        if score is None:
            return
        try:
            value = int(score)
        except ValueError:
            return
        yield RankingEntry(name, value)


class Ranking:
    """A ranking table backed by a text file."""

    def __init__(self, file_name: str | os.PathLike[str]) -> None:
        self.file_name = Path(file_name)
        self._entries: list[RankingEntry] = []
        self.load()

    @property
    def entries(self) -> list[RankingEntry]:
        """A copy of the current entries."""
        return [RankingEntry(e.player_name, e.score) for e in self._entries]

    def load(self) -> None:
        """Read entries from the file, creating an empty file if it is missing."""
        self._entries.clear()
        try:
            text = self.file_name.read_text(encoding="utf-8")
        except FileNotFoundError:
            with contextlib.suppress(OSError):
                self.file_name.touch()
            _log.info("Ranking file created: %s", self.file_name)
            return
        self._entries.extend(_parse_entries(text))

    def save(self) -> None:
        """Write all entries to the file."""
        with self.file_name.open("w", encoding="utf-8") as handle:
            handle.writelines(f"{e.player_name} {e.score}\n" for e in self._entries)

    def clear(self) -> None:
        """Remove every entry and save the empty table."""
        self._entries.clear()
        self.save()

    def add_entry(self, player_name: str, score: int) -> bool:
        """Add an entry, keep the table sorted and saved; True if it is a new best."""
        is_best = not self._entries or score > self._entries[0].score
        self._entries.append(RankingEntry(player_name, score))
        self._entries.sort(key=lambda entry: entry.score, reverse=True)
        self.save()
        return is_best