"""CLI handlers for the index, groups and suggest subcommands."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import orjson
import typer

from odiphone.config.loader import load_config
from odiphone.encode.script_filter import split_words
from odiphone.index.models import KeyLevel
from odiphone.index.phonetic_index import PhoneticIndex
from odiphone.utils.batching import unique_batches
from odiphone.utils.logging_setup import setup_logging

from .encode_cmd import build_encoder

logger = logging.getLogger(__name__)


def iter_words(path: Path) -> Iterator[str]:
    """Yield the Odia words of a UTF-8 text file, line by line."""
    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            yield from split_words(line)


def run_index(input_path: str, output_path: str, config_path: str | None) -> int:
    cfg = load_config(config_path)
    setup_logging(cfg.log_level)

    encoder = build_encoder(cfg)
    index = PhoneticIndex(encoder)
    out_path = Path(output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    logger.info("Encoding %s", input_path)
    count = 0
    with out_path.open("wb") as fout:
        for batch in unique_batches(iter_words(Path(input_path)), cfg.batch_size):
            entries = [index.add(word) for word in batch]
            # one write per batch
            fout.write(b"".join(orjson.dumps(e.to_dict()) + b"\n" for e in entries))
            count += len(entries)
            logger.debug("  %d words so far", count)
    logger.info("Wrote %d encoded words to %s", count, out_path)
    return count


def run_groups(input_path: str, level: int | None, config_path: str | None) -> None:
    cfg = load_config(config_path)
    setup_logging(cfg.log_level)

    key_level = KeyLevel(cfg.index.default_level if level is None else level)
    index = PhoneticIndex(build_encoder(cfg))
    index.add_many(iter_words(Path(input_path)))

    found = index.groups(key_level)
    for key, words in sorted(found.items()):
        typer.echo(f"{key}\t{' '.join(words)}")
    logger.info("Found %d groups at level %d", len(found), key_level)


def run_suggest(word: str, input_path: str, config_path: str | None) -> None:
    cfg = load_config(config_path)
    setup_logging(cfg.log_level)

    index = PhoneticIndex(build_encoder(cfg))
    index.add_many(iter_words(Path(input_path)))

    for candidate, score in index.suggest(
        word,
        limit=cfg.index.suggest_limit,
        min_similarity=cfg.index.min_similarity,
    ):
        typer.echo(f"{candidate}\t{score:.3f}")
