"""Score table snapshots built from the frecency tool's output.

The tool prints one directory per line as "<score> <path>". A table is
rebuilt from scratch on each refresh and published by swapping a single
reference, so a match in progress always sees one complete snapshot.
"""

import math
import re
import shlex
import subprocess
import threading
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

from .config import get_zoxide_binary
from .utils import log_debug, log_verbose

ScoreTable = Mapping[str, float]

EMPTY_TABLE: ScoreTable = MappingProxyType({})

QUERY_ARGS = ["query", "--list", "--all", "--score"]

# Plain ASCII decimal with optional exponent, no digit separators
SCORE_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def make_table(entries: Mapping[str, float] | Iterable[tuple[str, float]]) -> ScoreTable:
    """Read-only snapshot of path -> score entries."""
    return MappingProxyType(dict(entries))


def parse_score_line(line: str) -> Optional[tuple[str, float]]:
    """Parse "<score> <path...>" into (path, score).

    The path is the rest of the line, fields joined by single spaces.
    Returns None for blank lines, lines without a path, and lines whose
    first field is not a finite decimal number.
    """
    parts = line.split()
    if len(parts) < 2 or not SCORE_PATTERN.fullmatch(parts[0]):
        return None
    score = float(parts[0])
    if not math.isfinite(score):
        return None
    return " ".join(parts[1:]), score


def parse_scores(lines: Iterable[str]) -> ScoreTable:
    """Build a table from output lines, skipping unparseable ones.

    The first occurrence of a path wins.
    """
    entries: dict[str, float] = {}
    skipped = 0
    for line in lines:
        parsed = parse_score_line(line)
        if parsed is None:
            if line.strip():
                skipped += 1
            continue
        path, score = parsed
        entries.setdefault(path, score)

    if skipped:
        log_debug(f"Skipped {skipped} unparseable score line(s)")
    return make_table(entries)


def zoxide_command(binary: str | None = None) -> list[str]:
    """Command line used to list all scored directories."""
    return shlex.split(binary or get_zoxide_binary()) + QUERY_ARGS


def fetch_scores(command: list[str] | None = None, timeout: float = 10.0) -> ScoreTable:
    """Run the frecency tool and parse its output.

    Any failure (missing binary, non-zero exit, timeout) gives an empty
    table: there is simply nothing to suggest.
    """
    if command is None:
        command = zoxide_command()
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (OSError, subprocess.SubprocessError) as e:
        log_verbose(f"Could not run {command[0]}: {e}")
        return EMPTY_TABLE

    if result.returncode != 0:
        log_verbose(f"{command[0]} exited with status {result.returncode}")
        return EMPTY_TABLE

    table = parse_scores(result.stdout.splitlines())
    log_debug(f"Loaded {len(table)} scored directories")
    return table


class ScoreStore:
    """Holds the current score table snapshot.

    Readers call snapshot() once per request and keep that reference.
    Writers publish a complete new table with replace().
    """

    def __init__(self, table: ScoreTable | None = None):
        self._table = make_table(table) if table is not None else EMPTY_TABLE
        self._write_lock = threading.Lock()

    def snapshot(self) -> ScoreTable:
        return self._table

    def replace(self, table: ScoreTable) -> ScoreTable:
        """Publish `table` and return the published snapshot."""
        if not isinstance(table, MappingProxyType):
            table = make_table(table)
        with self._write_lock:
            self._table = table
        return table

    def refresh(self, fetch: Callable[[], ScoreTable] = fetch_scores) -> ScoreTable:
        """Build a new table with `fetch` and publish it."""
        return self.replace(fetch())

    def clear(self) -> None:
        self.replace(EMPTY_TABLE)

    def __len__(self) -> int:
        return len(self._table)
