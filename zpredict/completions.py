"""Shell completion functions for the zp CLI."""

from click.shell_completion import CompletionItem

from .database import ScoreStore, fetch_scores
from .predictor import ZoxidePredictor


def complete_directory(ctx, param, incomplete: str) -> list:
    """Shell completion for directory queries.

    Runs the configured predictor on "<command> <incomplete>" and offers
    the matched paths, best first.
    """
    store = ScoreStore(fetch_scores())
    predictor = ZoxidePredictor.from_config(store)

    # Earlier words of a multi-word query take part in matching too
    typed = list(ctx.params.get(param.name) or ()) if param.name else []
    query = " ".join([*typed, incomplete])

    return [
        CompletionItem(s.path, help=f"score {s.score:g}")
        for s in predictor.get_suggestions(predictor.prefix + query)
    ]
