"""CLI handlers for the encode and explain subcommands."""

from __future__ import annotations

import logging

import orjson
import typer

from odiphone.config.loader import load_config
from odiphone.config.schema import AppConfig, EncoderConfig
from odiphone.encode.encoder import ODIphone
from odiphone.index.models import EncodedWord
from odiphone.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_encoder(
    cfg: AppConfig,
    table_set: str | None = None,
    tables_path: str | None = None,
) -> ODIphone:
    """Encoder from *cfg*, with command-line overrides applied."""
    overrides: dict[str, object] = {}
    if table_set:
        overrides["table_set"] = table_set
        overrides["tables_path"] = None
    if tables_path:
        overrides["tables_path"] = tables_path
    encoder_cfg = EncoderConfig.model_validate({**cfg.encoder.model_dump(), **overrides})
    encoder = ODIphone.from_config(encoder_cfg)
    logger.info("Using table set %r", encoder.tables.name)
    return encoder


def run_encode(
    words: list[str],
    config_path: str | None,
    table_set: str | None = None,
    tables_path: str | None = None,
    as_json: bool = False,
) -> None:
    cfg = load_config(config_path)
    setup_logging(cfg.log_level)

    encoder = build_encoder(cfg, table_set, tables_path)
    for word in words:
        entry = EncodedWord(word, *encoder.encode(word))
        if as_json:
            typer.echo(orjson.dumps(entry.to_dict()).decode("utf-8"))
        else:
            typer.echo("\t".join((entry.word, entry.key0, entry.key1, entry.key2)))


def run_explain(word: str, config_path: str | None) -> None:
    cfg = load_config(config_path)
    setup_logging(cfg.log_level)

    encoder = build_encoder(cfg)
    for token in encoder.tokenize(word):
        typer.echo(f"{token.kind.value:<10} {token.text}\t{token.code}")
    key0, key1, key2 = encoder.encode(word)
    typer.echo(f"keys       {key0} {key1} {key2}")
