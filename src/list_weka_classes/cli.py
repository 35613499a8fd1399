"""Command-line interface for list-weka-classes."""

import logging
from pathlib import Path

import click

from .core.lister import ClassLister, UnknownSuperclassError, load_registry
from .core.models import ListerOptions, OutputFormat
from .core.registry import RegistryError
from .core.reporting import REPORTERS

logger = logging.getLogger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_PARSE_FAILURE = 1
EXIT_QUERY_FAILURE = 2


class OptionParseError(click.UsageError):
    """Malformed or unknown command-line input."""

    exit_code = EXIT_PARSE_FAILURE


class ListerCommand(click.Command):
    """Command that reports parse failures with their own exit code."""

    def parse_args(self, ctx, args):
        # Help wins anywhere on the command line, even as the value of -s
        if any(token in ctx.help_option_names for token in args):
            click.echo(ctx.get_help(), color=ctx.color)
            ctx.exit(EXIT_OK)

        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            raise OptionParseError(e.format_message(), ctx=ctx) from e


@click.command(
    cls=ListerCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--offline",
    "-o",
    is_flag=True,
    help="If enabled, the package manager is run in offline mode.",
)
@click.option(
    "--load_packages",
    "-l",
    is_flag=True,
    help="If enabled, packages get loaded before determining the class hierarchies.",
)
@click.option(
    "--super_class",
    "-s",
    metavar="CLASSNAME",
    default="",
    help="The super class to list the class names for; outputs all super classes if not supplied.",
)
@click.option(
    "--resources",
    "-r",
    is_flag=True,
    help="List the registered resources instead of the class hierarchies.",
)
@click.option(
    "--exclude_disabled",
    "-x",
    is_flag=True,
    help="Leave out classes that are disabled in the registry.",
)
@click.option(
    "--format",
    "-f",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.TEXT.value,
    help="Output format (default: text)",
)
@click.option(
    "--catalog",
    "-c",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    default=None,
    help="Class catalog to use instead of the bundled one.",
)
@click.option(
    "--verbose", "-v", count=True, help="Increase verbosity (-v for INFO, -vv for DEBUG)"
)
def main(
    offline, load_packages, super_class, resources, exclude_disabled, format, catalog, verbose
):
    """
    Listing Weka class hierarchies.

    Prints all known superclasses, or the classes registered for the
    superclass given with --super_class, one per line in sorted order.
    """
    # Setup logging
    if verbose == 1:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    elif verbose >= 2:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    options = ListerOptions(
        offline=offline,
        load_packages=load_packages,
        super_class=super_class,
        resources=resources,
        exclude_disabled=exclude_disabled,
    )
    reporter = REPORTERS[OutputFormat(format.lower())]()

    try:
        registry = load_registry("catalog", catalog_path=catalog)
        ClassLister(registry, reporter=reporter).execute(options)
    except (UnknownSuperclassError, RegistryError) as e:
        logger.debug(f"Query failed for {options}")
        click.echo(f"Failed to list classes: {e}", err=True)
        raise SystemExit(EXIT_QUERY_FAILURE)

    raise SystemExit(EXIT_OK)


if __name__ == "__main__":
    main()
