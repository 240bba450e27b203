"""CLI commands for rijksregisternummer."""

import json
import logging
import sys
from pathlib import Path

import click

from rijksregisternummer import Category, Rijksregisternummer, decoder, encoder, validator
from rijksregisternummer.cleaner import NON_DIGITS, clean
from rijksregisternummer.config import Config
from rijksregisternummer.exceptions import InvalidRijksregisternummerError
from rijksregisternummer.generator import RijksregisternummerGenerator

CATEGORY_NAMES = [category.name.lower() for category in Category]


def _category(name: str | None) -> Category | None:
    return Category[name.upper()] if name else None


def _decoded_birthday(number: str) -> str:
    year, month, day = decoder.extract_birthday_parts(number)
    return f"{year:04d}-{month:02d}-{day:02d}"


def _parse(ctx: click.Context, value: str) -> Rijksregisternummer:
    config: Config = ctx.obj["config"]
    try:
        return Rijksregisternummer(value, config.cleaner.formatting_characters)
    except InvalidRijksregisternummerError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name="rijksregisternummer")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to rijksregisternummer.toml (default: search upwards from cwd)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """rijksregisternummer - Belgian national register numbers."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    ctx.ensure_object(dict)
    if config_path is not None:
        ctx.obj["config"] = Config.from_toml(config_path)
    else:
        ctx.obj["config"] = Config.find_and_load()


@cli.command("clean")
@click.argument("value")
@click.option("--strict", is_flag=True, help="Remove every non-digit character")
@click.pass_context
def clean_command(ctx: click.Context, value: str, strict: bool) -> None:
    """Remove formatting characters."""
    config: Config = ctx.obj["config"]
    pattern = NON_DIGITS if strict else config.cleaner.formatting_characters
    click.echo(clean(value, pattern))


@cli.command()
@click.argument("value")
@click.option("--quiet", "-q", is_flag=True, help="Only output result (0=valid, 1=invalid)")
@click.pass_context
def validate(ctx: click.Context, value: str, quiet: bool) -> None:
    """Validate a number."""
    config: Config = ctx.obj["config"]
    result = validator.validate(clean(value, config.cleaner.formatting_characters))

    if quiet:
        sys.exit(0 if result.valid else 1)

    if result.valid:
        click.echo(f"✓ Valid: {value}")
        sys.exit(0)
    else:
        click.echo(f"✗ Invalid: {value} ({result.error})", err=True)
        sys.exit(1)


@cli.command("format")
@click.argument("value")
@click.pass_context
def format_command(ctx: click.Context, value: str) -> None:
    """Print a valid number as yy.mm.dd-nnn.cc."""
    click.echo(_parse(ctx, value).human_format())


@cli.command()
@click.argument("value")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def decode(ctx: click.Context, value: str, output_json: bool) -> None:
    """Decode a number into its fields."""
    decoded = _parse(ctx, value).decode()

    if output_json:
        click.echo(json.dumps(decoded.to_dict(), indent=2))
        return

    click.echo(f"Number: {decoded.human_format}")
    click.echo(f"  category:        {decoded.category.name.lower()}")
    click.echo(f"  birthday:        {decoded.birthday or 'unknown'}")
    click.echo(f"  birth_year:      {decoded.birth_year or 'unknown'}")
    click.echo(f"  gender:          {decoded.gender.value or 'unknown'}")
    click.echo(f"  sequence_number: {decoded.sequence_number}")
    click.echo(f"  check_digits:    {decoded.check_digits:02d}")


@cli.command()
@click.option("--birthday", required=True, help="Birthday (YYYY-MM-DD, 00 for unknown parts)")
@click.option("--sequence", type=click.IntRange(1, 998), required=True, help="Sequence number")
@click.option(
    "--category",
    type=click.Choice(CATEGORY_NAMES),
    default="rijksregisternummer",
    help="Category (default: rijksregisternummer)",
)
@click.option("--human", is_flag=True, help="Output in yy.mm.dd-nnn.cc format")
def create(birthday: str, sequence: int, category: str, human: bool) -> None:
    """Create a number from its fields."""
    try:
        number = encoder.create(birthday, sequence, _category(category))
    except ValueError:
        number = None

    if (
        number is None
        or not validator.is_valid(number)
        or _decoded_birthday(number) != birthday
    ):
        click.echo(f"Error: Invalid birthday: {birthday}", err=True)
        sys.exit(1)

    click.echo(decoder.format(number) if human else number)


@cli.command()
@click.option("--count", type=int, default=1, help="Number of numbers to generate (default: 1)")
@click.option("--category", type=click.Choice(CATEGORY_NAMES), help="Category (default: from config)")
@click.option("--gender", type=click.Choice(["M", "F"]), help="Gender (default: random)")
@click.option("--seed", type=int, help="Seed for reproducible output")
@click.pass_context
def generate(
    ctx: click.Context,
    count: int,
    category: str | None,
    gender: str | None,
    seed: int | None,
) -> None:
    """Generate random valid numbers."""
    config: Config = ctx.obj["config"]

    if count < 1:
        click.echo("Error: --count must be at least 1", err=True)
        sys.exit(1)

    generator_config = config.generator
    if seed is not None:
        generator_config = generator_config.model_copy(update={"seed": seed})

    gen = RijksregisternummerGenerator(generator_config)
    overrides = {"gender": gender}
    if category is not None:
        overrides["category"] = _category(category)

    for number in gen.generate_batch(count, **overrides):
        click.echo(number)


if __name__ == "__main__":
    cli()
