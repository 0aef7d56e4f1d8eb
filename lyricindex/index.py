"""Word counting and an inverted index built on open-addressing hash tables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Iterator

from lyricindex.text import split

CAPACITY = 1024
_SIZE_MASK = (1 << 64) - 1


def djb2_hash(key: str, mod: int) -> int:
    """Return the djb2 hash of ``key`` (64-bit arithmetic) reduced modulo ``mod``."""
    value = 5381
    for byte in key.encode("latin-1", errors="replace"):
        signed = byte - 256 if byte > 127 else byte
        value = ((value << 5) + value + signed) & _SIZE_MASK
    return value % mod


class _ProbingTable:
    """Hash table with linear probing that doubles when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._keys: list[str | None] = [None] * capacity
        self._values: list[Any] = [None] * capacity
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def _locate(self, key: str) -> tuple[int, bool]:
        capacity = len(self._keys)
        idx = djb2_hash(key, capacity)
        while (existing := self._keys[idx]) is not None:
            if existing == key:
                return idx, True
            idx = (idx + 1) % capacity
        return idx, False

    def _grow(self) -> None:
        old = list(self.items())
        capacity = len(self._keys) * 2
        self._keys = [None] * capacity
        self._values = [None] * capacity
        self._count = 0
        for key, value in old:
            self.add(key, value)

    def add(self, key: str, value: Any) -> bool:
        """Store ``value`` under ``key`` unless the key is present."""
        if self._count == len(self._keys):
            self._grow()
        idx, found = self._locate(key)
        if found:
            return False
        self._keys[idx] = key
        self._values[idx] = value
        self._count += 1
        return True

    def get(self, key: str) -> Any:
        idx, found = self._locate(key)
        if not found:
            raise KeyError(key)
        return self._values[idx]

    def replace(self, key: str, value: Any) -> None:
        idx, found = self._locate(key)
        if not found:
            raise KeyError(key)
        self._values[idx] = value

    def __contains__(self, key: str) -> bool:
        return self._locate(key)[1]

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield stored pairs in slot order."""
        for key, value in zip(self._keys, self._values):
            if key is not None:
                yield key, value


class HashCounter:
    """Counts occurrences of string keys."""

    def __init__(self, capacity: int = CAPACITY) -> None:
        self._table = _ProbingTable(capacity)

    def insert(self, key: str, val: int) -> bool:
        """Add ``key`` with count ``val``; return False if it already exists."""
        return self._table.add(key, val)

    def get(self, key: str) -> int:
        """Return the count of ``key``; raise KeyError if absent."""
        return self._table.get(key)

    def increment(self, key: str) -> int:
        """Add one to the count of ``key``, starting at one, and return it."""
        if self._table.add(key, 1):
            return 1
        value = self._table.get(key) + 1
        self._table.replace(key, value)
        return value

    def items(self) -> Iterator[tuple[str, int]]:
        """Yield ``(key, count)`` pairs in table order."""
        return self._table.items()

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, key: str) -> bool:
        return key in self._table

    def render(self) -> str:
        """Return one ``key \\t=> count`` line per entry."""
        return "".join(f"{key} \t=> {val}\n" for key, val in self.items())

    @classmethod
    def from_words(cls, words) -> "HashCounter":
        """Build a counter from an iterable of words."""
        counter = cls()
        for word in words:
            counter.increment(word)
        return counter


def read_file(path) -> str:
    """Return the contents of ``path``; each byte becomes one character."""
    with open(path, "r", encoding="latin-1") as handle:
        return handle.read()


@dataclass(frozen=True)
class TermFreq:
    """Occurrence count of a term in one document."""

    doc_id: int
    freq: int


@dataclass
class Posting:
    """All documents that contain a term."""

    term: str
    entries: list[TermFreq] = field(default_factory=list)

    @property
    def doc_freq(self) -> int:
        return len(self.entries)


class InvertedIndex:
    """Maps each term to the documents it occurs in and how often."""

    def __init__(self) -> None:
        self.collection: list[str] = []
        self._table = _ProbingTable(CAPACITY)

    def __len__(self) -> int:
        return len(self._table)

    def add_text(self, name: str, text: str) -> int:
        """Index ``text`` as a document called ``name`` and return its id."""
        counts = HashCounter.from_words(split(text))
        doc_id = len(self.collection)
        self.collection.append(name)
        for term, freq in counts.items():
            self._table.add(term, Posting(term))
            self._table.get(term).entries.append(TermFreq(doc_id, freq))
        return doc_id

    def add_document(self, path) -> int:
        """Read and index the file at ``path``; raises OSError if unreadable."""
        text = read_file(path)
        return self.add_text(os.fspath(path), text)

    def postings(self, term: str) -> list[TermFreq]:
        """Return the postings of ``term``, empty if it is not indexed."""
        if term not in self._table:
            return []
        return list(self._table.get(term).entries)

    def terms(self) -> list[Posting]:
        """Return every posting in table order."""
        return [posting for _, posting in self._table.items()]

    def render(self) -> str:
        """Return a human-readable listing of documents and terms."""
        lines = [
            "╔══════════════════════════════════════╗",
            f"║        INVERTED INDEX ({len(self.collection):<3} docs)     ║",
            "╚══════════════════════════════════════╝",
            "",
            "Document Collection:",
        ]
        lines.extend(f"  [{i}] {name}" for i, name in enumerate(self.collection))
        lines.append("")
        lines.append(f"Terms (total {len(self)}):")
        for posting in self.terms():
            entries = ", ".join(f"[{e.doc_id}:{e.freq}]" for e in posting.entries)
            lines.append(f"  • {posting.term} (df={posting.doc_freq}): {entries}")
        return "\n".join(lines) + "\n"