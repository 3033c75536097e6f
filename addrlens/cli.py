import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .models import NameServiceError, ResolutionError
from .lookup import AddressLookup
from .resolve import BACKENDS, create_name_service
from .output import ConsoleOutput, JsonExporter


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Route log records through rich on stderr"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.command(context_settings={'auto_envvar_prefix': 'ADDRLENS'})
@click.argument('target')
@click.option('-b', '--backend', default='system',
              type=click.Choice(list(BACKENDS), case_sensitive=False),
              help='Name service backend (default: system)')
@click.option('-n', '--nameserver', 'nameservers', multiple=True,
              help='DNS server to query, repeatable (dns backend only)')
@click.option('--dns/--no-dns', default=True,
              help='Enable/disable reverse DNS lookups (default: enabled)')
@click.option('--json', 'json_path', type=click.Path(dir_okay=False),
              help='Export results to JSON file')
@click.option('-v', '--verbose', is_flag=True,
              help='Show debug logging')
@click.version_option(version=__version__)
def main(target: str, backend: str, nameservers: tuple[str, ...], dns: bool,
         json_path: Optional[str], verbose: bool):
    """
    AddrLens - address lookup and classification.

    Resolve TARGET (hostname or IP address) and show, for every
    address, its version, private/loopback flags, common use and
    reverse DNS names.

    Examples:

        addrlens 8.8.8.8

        addrlens example.com -b dns -n 1.1.1.1

        addrlens ::1 --json output.json
    """
    setup_logging(verbose)
    output = ConsoleOutput()

    if nameservers and backend.lower() != 'dns':
        output.print_warning("--nameserver is ignored by the system backend")
        nameservers = ()

    try:
        name_service = create_name_service(backend, nameservers=list(nameservers))
        logger.debug("Looking up %r with %s backend", target, name_service.name)
        with name_service:
            details = AddressLookup(backend=name_service, reverse=dns).run(target)

        output.print_header(target=target, count=len(details), backend=name_service.name)
        output.print_results(details)
    except (ResolutionError, NameServiceError) as e:
        output.print_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        output.console.print("\n[yellow]Interrupted[/]")
        sys.exit(130)

    if json_path:
        exporter = JsonExporter(backend=name_service.name)
        json_file = Path(json_path)
        try:
            exporter.export(target, details, json_file)
        except OSError as e:
            output.print_error(f"Cannot write {json_file}: {e}")
            sys.exit(1)
        output.console.print(f"\n[dim]Results exported to:[/] {json_file.absolute()}")


if __name__ == '__main__':
    main()
