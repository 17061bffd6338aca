"""Options shared by the matching commands."""

import functools
import sys

import click

from ..database import ScoreStore, fetch_scores, parse_scores


def scores_option(f):
    """Add --from-file and pass a loaded ScoreStore as `store`.

    Without --from-file the frecency tool is run once for this command.
    """

    @click.option(
        "--from-file",
        "from_file",
        type=click.Path(allow_dash=True, dir_okay=False),
        help="Read '<score> <path>' lines from a file ('-' for stdin) instead of running zoxide",
    )
    @functools.wraps(f)
    def wrapper(*args, from_file: str | None = None, **kwargs):
        kwargs["store"] = load_store(from_file)
        return f(*args, **kwargs)

    return wrapper


def load_store(from_file: str | None) -> ScoreStore:
    if from_file is None:
        return ScoreStore(fetch_scores())
    if from_file == "-":
        return ScoreStore(parse_scores(sys.stdin.read().splitlines()))
    try:
        with open(from_file, encoding="utf-8") as f:
            return ScoreStore(parse_scores(f.read().splitlines()))
    except OSError as e:
        raise click.ClickException(f"Cannot read scores from {from_file}: {e}")
