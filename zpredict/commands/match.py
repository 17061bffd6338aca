"""Matching commands for the zp CLI (query, suggest, top)."""

import click

from ..completions import complete_directory
from ..config import get_setting, load_config
from ..predictor import MatchStrategy, ZoxidePredictor
from ..search import (
    LastComponentMode,
    MatchOptions,
    Matcher,
    SuggestionStyle,
    TokenizerMode,
    top_entries,
)
from ..utils import log_info
from .common import scores_option


def _choice(enum_cls):
    return click.Choice([m.value for m in enum_cls])


def _show(text: str, score: float, scores: bool) -> None:
    if scores:
        log_info(f"{score:>10.1f}  {text}")
    else:
        log_info(text)


@click.command()
@click.argument("words", nargs=-1, required=True, shell_complete=complete_directory)
@click.option("--tokenizer", type=_choice(TokenizerMode), help="Treat spaces as separators or not")
@click.option("--last", "last_component", type=_choice(LastComponentMode),
              help="Last component must equal or just contain the last keyword")
@click.option("--style", type=_choice(SuggestionStyle), help="Show paths or completed queries")
@click.option("--limit", "-n", type=click.IntRange(min=1), help="Show at most N results")
@click.option("--scores", "-s", is_flag=True, help="Show scores next to results")
@scores_option
def query(words, tokenizer, last_component, style, limit, scores, store):
    """Rank directories matching a query.

    Words must appear in the path in the order typed, and the last word
    must match the final directory name.

    Examples:
        zp query proj ba
        zp query --last exact -s repo
        zp query --tokenizer separators_and_space proj api
    """
    config = load_config()
    base = MatchOptions.from_config(config)
    options = MatchOptions(
        tokenizer=TokenizerMode(tokenizer) if tokenizer else base.tokenizer,
        last_component=LastComponentMode(last_component) if last_component else base.last_component,
        suggestion=SuggestionStyle(style) if style else base.suggestion,
        prefix=base.prefix,
        limit=limit,
    )

    text = " ".join(words)
    suggestions = Matcher(options).match(text, store.snapshot())
    if not suggestions:
        log_info(click.style(f"No directories match: {text}", dim=True))
        return

    for suggestion in suggestions:
        _show(suggestion.text, suggestion.score, scores)


@click.command()
@click.argument("line")
@click.option("--strategy", type=_choice(MatchStrategy), help="Ordered matching or prefix lookup")
@click.option("--scores", "-s", is_flag=True, help="Show scores next to suggestions")
@scores_option
def suggest(line, strategy, scores, store):
    """Show what the predictor suggests for a full command line.

    Examples:
        zp suggest "cd "
        zp suggest "cd proj ba"
        zp suggest --strategy prefix "cd /home/me"
    """
    predictor = ZoxidePredictor.from_config(store)
    if strategy:
        predictor.strategy = MatchStrategy(strategy)

    for suggestion in predictor.get_suggestions(line):
        _show(suggestion.text, suggestion.score, scores)


@click.command()
@click.option("--limit", "-n", type=click.IntRange(min=1), help="Number of directories to show")
@click.option("--scores", "-s", is_flag=True, help="Show scores next to paths")
@scores_option
def top(limit, scores, store):
    """List the highest scored directories.

    Examples:
        zp top
        zp top -n 3 -s
    """
    if limit is None:
        limit = get_setting("limit")

    entries = top_entries(store.snapshot(), limit)
    if not entries:
        log_info(click.style("No scored directories.", dim=True))
        return

    for entry in entries:
        _show(entry.path, entry.score, scores)
