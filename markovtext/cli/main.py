import json
import logging
from enum import Enum
from typing import Optional

import requests
import typer

from markovtext.config import settings
from markovtext.core.errors import UnknownPrefixError
from markovtext.core.rng import TimeSeededRandom
from markovtext.core.validation import is_valid_count, is_valid_order
from markovtext.services import build_model, generate_words, get_stats, render


app = typer.Typer(help="Generate text from an order-N Markov chain trained on the input.")
logger = logging.getLogger(__name__)


class Sep(str, Enum):
    space = "space"
    newline = "newline"


def _headers():
    h = {}
    if settings.api_key:
        h["X-API-Key"] = settings.api_key
    return h


def _setup_logging(verbose: bool):
    level = logging.INFO if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s', level=level)


def _check_count(count: int):
    if not is_valid_count(count):
        raise typer.BadParameter("must be a non-negative integer", param_hint="COUNT")


def _check_order(order: Optional[int]):
    if order is not None and not is_valid_order(order):
        raise typer.BadParameter("must be >= 1", param_hint="--order")


@app.command()
def generate(
    count: int = typer.Argument(..., help="Number of words to generate."),
    source: typer.FileText = typer.Option("-", "--input", "-i", errors="replace",
                                         help="Training text, '-' for stdin."),
    order: Optional[int] = typer.Option(None, help="Prefix length (default from settings)."),
    seed: Optional[int] = typer.Option(None, help="Fixed random seed."),
    start: Optional[str] = typer.Option(None, help="Start prefix, N space-separated words."),
    sep: Sep = typer.Option(Sep.space, help="Separator between output words."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    _setup_logging(verbose)
    _check_count(count)
    _check_order(order)
    mkv = build_model(source, order=order, rng=TimeSeededRandom(seed))
    try:
        words = generate_words(mkv, count, start=start.split() if start else None)
    except UnknownPrefixError as e:
        raise typer.BadParameter(str(e), param_hint="--start")
    typer.echo(render(words, sep.value))


@app.command()
def stats(
    source: typer.FileText = typer.Option("-", "--input", "-i", errors="replace"),
    order: Optional[int] = typer.Option(None),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    _setup_logging(verbose)
    _check_order(order)
    mkv = build_model(source, order=order)
    typer.echo(json.dumps(get_stats(mkv), indent=2))


@app.command()
def remote(
    count: int,
    source: typer.FileText = typer.Option("-", "--input", "-i", errors="replace"),
    order: Optional[int] = typer.Option(None),
    seed: Optional[int] = typer.Option(None),
    start: Optional[str] = typer.Option(None),
):
    _check_count(count)
    _check_order(order)
    body = {"text": source.read(), "count": count, "seed": seed}
    if order is not None:
        body["order"] = order
    if start:
        body["start"] = start.split()
    r = requests.post(f"{settings.api_base}/generate", json=body, headers=_headers())
    r.raise_for_status()
    typer.echo(r.json()["text"])


if __name__ == "__main__":
    app()
