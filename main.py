from pathlib import Path
from typing import Optional

import typer

from src.corpus import CorpusFormatError, RunConfig, segment_text
from src.corpus.config import (
    DEFAULT_DICTIONARY,
    DEFAULT_INPUT_DIR,
    DEFAULT_SHARD_COUNT,
    DEFAULT_SHARD_PREFIX,
    DEFAULT_WORKERS,
    DictionaryName,
)
from src.inflection import merge_inflections
from src.morphology import REGISTRY, TaggerInitError, TokenizerAdapter
from src.pipelines import run_corpus

app = typer.Typer()


def _check_dictionary(dictionary: str) -> DictionaryName:
    if dictionary not in REGISTRY:
        raise typer.BadParameter(f"Unknown dictionary '{dictionary}'. Available: {', '.join(REGISTRY)}")
    return dictionary  # type: ignore[return-value]


@app.command()
def count(
    input_dir: Path = typer.Option(
        DEFAULT_INPUT_DIR,
        "--input-dir",
        file_okay=False,
        dir_okay=True,
        help="Directory holding the JSONL shards.",
    ),
    shard_prefix: str = typer.Option(
        DEFAULT_SHARD_PREFIX,
        "--shard-prefix",
        help="Shard file prefix; files are named <prefix>-NN.jsonl.",
    ),
    shards: int = typer.Option(DEFAULT_SHARD_COUNT, "--shards", help="Number of shards to read (00 .. shards-1)."),
    workers: int = typer.Option(DEFAULT_WORKERS, "--workers", help="Worker threads per shard."),
    dictionary: str = typer.Option(DEFAULT_DICTIONARY, "--dictionary", help="MeCab dictionary layout (ipadic, unidic)."),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        help="Output JSON path (defaults to frequency_list_<dictionary>.json).",
    ),
    progress: bool = typer.Option(True, help="Show a per-shard progress bar."),
) -> None:
    """
    Count merged surface forms and inflection tags over the whole corpus.
    """
    config = RunConfig(
        input_dir=input_dir,
        shard_prefix=shard_prefix,
        shard_count=shards,
        workers=workers,
        dictionary=_check_dictionary(dictionary),
        output_path=output,
    )
    try:
        config.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        run_corpus(config, show_progress=progress)
    except (CorpusFormatError, FileNotFoundError, TaggerInitError) as exc:
        typer.echo(f"[corpus] Aborting: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def inflect(
    text: str = typer.Argument(..., help="Text to segment, tokenize and merge."),
    dictionary: str = typer.Option(DEFAULT_DICTIONARY, "--dictionary", help="MeCab dictionary layout (ipadic, unidic)."),
) -> None:
    """Print the merged tokens of TEXT, one per line."""
    try:
        adapter = TokenizerAdapter.from_dictionary(_check_dictionary(dictionary))
    except TaggerInitError as exc:
        typer.echo(f"[corpus] Aborting: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    for fragment in segment_text(text):
        merged = merge_inflections(adapter.parse(fragment))
        for token in merged.tokens:
            typer.echo(f"{token.surface}\t{token.pos}\t{token.lemma}")
        for tag, hits in sorted(merged.inflections.items()):
            typer.echo(f"[inflect] {tag} x{hits}")


if __name__ == "__main__":
    app()
