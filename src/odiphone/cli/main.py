"""Main Typer application."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="odiphone",
    help="Phonetic keys for Odia words.",
    no_args_is_help=True,
)


@app.command()
def encode(
    words: list[str] = typer.Argument(..., help="Odia words to encode"),
    config: str = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    table_set: str = typer.Option(
        None, "--table-set", "-t", help="Override the built-in table set"
    ),
    tables: str = typer.Option(None, "--tables", help="Path to a YAML table file"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON lines"),
) -> None:
    """Print key0, key1 and key2 for each word."""
    from .encode_cmd import run_encode

    run_encode(words, config, table_set, tables, as_json)


@app.command()
def explain(
    word: str = typer.Argument(..., help="Odia word to tokenize"),
    config: str = typer.Option(None, "--config", "-c", help="Path to config YAML"),
) -> None:
    """Show how a word is split into tokens and coded."""
    from .encode_cmd import run_explain

    run_explain(word, config)


@app.command()
def index(
    input_path: str = typer.Argument(..., help="UTF-8 word list, one entry per line"),
    output_path: str = typer.Argument(..., help="Output JSONL file"),
    config: str = typer.Option(None, "--config", "-c", help="Path to config YAML"),
) -> None:
    """Encode a word list into JSONL records."""
    from .index_cmd import run_index

    run_index(input_path, output_path, config)


@app.command()
def groups(
    input_path: str = typer.Argument(..., help="UTF-8 word list, one entry per line"),
    level: int = typer.Option(
        None, "--level", "-l", min=0, max=2, help="Key level to group on (0-2)"
    ),
    config: str = typer.Option(None, "--config", "-c", help="Path to config YAML"),
) -> None:
    """Print groups of words that share a phonetic key."""
    from .index_cmd import run_groups

    run_groups(input_path, level, config)


@app.command()
def suggest(
    word: str = typer.Argument(..., help="Possibly misspelt Odia word"),
    input_path: str = typer.Argument(..., help="UTF-8 word list, one entry per line"),
    config: str = typer.Option(None, "--config", "-c", help="Path to config YAML"),
) -> None:
    """Suggest words from a word list that sound like WORD."""
    from .index_cmd import run_suggest

    run_suggest(word, input_path, config)


if __name__ == "__main__":
    app()
