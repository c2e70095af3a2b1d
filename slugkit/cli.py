from __future__ import annotations

import sys

import click
from pydantic import ValidationError

from slugkit.config import Config, load_env_file
from slugkit.exceptions import SlugError
from slugkit.logging_config import configure_logging
from slugkit.repositories.charmap import BUILTIN_MODES, CharmapRegistry
from slugkit.services.slug import Slugifier


def _parse_extension(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}")
        mapping[key] = value
    return mapping


@click.command()
@click.argument("text", nargs=-1)
@click.option("-r", "--replacement", help="Delimiter joining the slug words.")
@click.option("-m", "--mode", type=click.Choice(BUILTIN_MODES), help="Character set to keep.")
@click.option("-l", "--locale", help="Locale override table (bg, de, sr, uk).")
@click.option("--lower/--no-lower", default=None, help="Lower-case the result.")
@click.option("--trim/--no-trim", default=None, help="Strip surrounding whitespace first.")
@click.option("--fallback/--no-fallback", default=None, help="Base64 fallback for empty results.")
@click.option("--remove", metavar="REGEX", help="Pattern deleted after transliteration.")
@click.option(
    "-x", "--extend", "extension", multiple=True, metavar="KEY=VALUE",
    callback=_parse_extension, help="Extra character mapping (repeatable).",
)
def main(
    text: tuple[str, ...],
    replacement: str | None,
    mode: str | None,
    locale: str | None,
    lower: bool | None,
    trim: bool | None,
    fallback: bool | None,
    remove: str | None,
    extension: dict[str, str],
) -> None:
    """Print the slug of TEXT, or of each line of standard input."""
    load_env_file()
    config = Config()
    configure_logging(config.LOG_LEVEL, json_logs=config.LOG_JSON)

    # Extensions only live for this run
    registry = CharmapRegistry(mode=config.DEFAULT_MODE, fallback=config.FALLBACK, locale=config.LOCALE)
    if extension:
        registry.extend(extension)
    slugifier = Slugifier(registry)

    overrides = {
        name: value
        for name, value in {
            "replacement": replacement,
            "mode": mode,
            "locale": locale,
            "lower": lower,
            "trim": trim,
            "fallback": fallback,
            "remove": remove,
        }.items()
        if value is not None
    }

    lines = [" ".join(text)] if text else sys.stdin.read().splitlines()
    try:
        for line in lines:
            click.echo(slugifier(line, **overrides))
    except (SlugError, ValidationError) as e:
        raise click.ClickException(str(e)) from e
