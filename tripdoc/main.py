import asyncio
from pathlib import Path

import click

from tripdoc.config.settings import Settings
from tripdoc.extraction.dispatcher import build_dispatcher
from tripdoc.extraction.exceptions import ExtractionError
from tripdoc.extraction.file_loader import FileLoader
from tripdoc.logging.logger import Log


@click.group()
def cli() -> None:
    """Extract sanitized plain text from travel documents."""


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--media-type",
    default=None,
    help="Declared media type. Guessed from the file extension when omitted.",
)
def extract(path: Path, media_type: str | None) -> None:
    """Print the sanitized text of the document at PATH."""
    settings = Settings()
    Log.configure(settings.log_level)

    uploaded = FileLoader().load(path, media_type)
    dispatcher = build_dispatcher(settings)
    try:
        result = asyncio.run(dispatcher.extract(uploaded))
    except ExtractionError as exc:
        Log.error(f"Extraction failed: {exc}", file=path.name, kind=exc.kind)
        click.echo(f"Could not process document ({exc.kind})", err=True)
        raise SystemExit(1) from exc

    click.echo(result.text)


if __name__ == "__main__":
    cli()
