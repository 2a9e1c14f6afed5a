import logging
import sys

import click

from . import __version__
from ._exceptions import LexPathEnvironmentUnavailableError, LexPathInvalidInputError
from ._normalizer import PathNormalizer

logger = logging.getLogger(__name__)


@click.command("lexpath")
@click.version_option(__version__, "--version", "-v", message="%(version)s")
@click.option(
    "--flavour",
    type=click.Choice(["auto", "posix", "windows"], case_sensitive=False),
    default="auto",
    help="Path rules to apply; 'auto' follows the running platform.",
)
@click.option(
    "--cwd",
    default=None,
    help="Absolute directory that relative paths are resolved against. Defaults to the process working directory.",
)
@click.option(
    "--no-resolve",
    is_flag=True,
    default=False,
    help="Only collapse '.' and '..' lexically; leave relative paths relative.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Verbosity of the diagnostics written to stderr.",
)
@click.argument("paths", nargs=-1, required=True)
def main(flavour, cwd, no_resolve, log_level, paths):
    "Print the canonical form of each PATH, one per line."
    logging.basicConfig(stream=sys.stderr, level=log_level.upper())
    try:
        normalizer = PathNormalizer(flavour=flavour.lower(), cwd=cwd)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--cwd") from exc

    failed = 0
    for raw_path in paths:
        try:
            if no_resolve:
                click.echo(normalizer.collapse(raw_path))
            else:
                click.echo(normalizer.normalize(raw_path))
        except (LexPathInvalidInputError, LexPathEnvironmentUnavailableError) as exc:
            logger.debug("Failed to normalize %r", raw_path, exc_info=True)
            click.echo(f"error: {exc}", err=True)
            failed += 1
    if failed:
        sys.exit(1)
