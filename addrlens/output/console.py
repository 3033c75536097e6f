"""
Rich console output for AddrLens
"""

from typing import Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich import box

from ..models import AddressDetail
from .. import __version__


# Label styling
USE_STYLES = {
    'Private network (RFC 1918)': 'yellow',
    'Unique local address (ULA)': 'yellow',
    'Carrier-grade NAT (RFC 6598)': 'yellow',
    'Loopback': 'dim',
    'Link-local (APIPA)': 'dim',
    'Link-local': 'dim',
    'Multicast': 'magenta',
    'Documentation': 'cyan',
    'Teredo tunneling': 'cyan',
    '6to4': 'cyan',
    'Public address': 'green',
    'Global unicast': 'green',
}


class ConsoleOutput:
    """
    Rich console output for lookup results.

    Features:
    - Header panel with target and backend
    - One table row per resolved address
    - Color-coded classification labels
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def print_header(self, target: str, count: int, backend: str):
        """Print lookup header"""
        content = Text()
        content.append("AddrLens", style="bold cyan")
        content.append(f" v{__version__}\n", style="dim")
        content.append("Target: ", style="dim")
        content.append(target, style="bold")
        content.append("\n")
        plural = "es" if count != 1 else ""
        content.append(f"{count} address{plural}  |  Backend: {backend}", style="dim")

        panel = Panel(content, border_style="cyan", padding=(0, 1))
        self.console.print(panel)

    def print_results(self, details: list[AddressDetail]):
        """Print results table"""
        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="dim",
            padding=(0, 1)
        )

        table.add_column("#", style="dim", width=3, justify="right")
        table.add_column("Address", min_width=15)
        table.add_column("Version", width=7)
        table.add_column("Flags", width=16)
        table.add_column("Common use", min_width=20)
        table.add_column("Reverse DNS", overflow="fold")

        for index, detail in enumerate(details, start=1):
            table.add_row(
                str(index),
                detail.ip,
                detail.version,
                self._format_flags(detail),
                self._format_uses(detail.common_uses),
                self._format_names(detail.reverse_names),
            )

        self.console.print(table)

    def print_error(self, message: str):
        """Print error message"""
        self.console.print(f"[bold red]Error:[/] {message}")

    def print_warning(self, message: str):
        """Print warning message"""
        self.console.print(f"[yellow]Warning:[/] {message}")

    def _format_flags(self, detail: AddressDetail) -> str:
        flags = []
        if detail.is_private:
            flags.append("private")
        if detail.is_loopback:
            flags.append("loopback")
        return ", ".join(flags) if flags else "-"

    def _format_uses(self, uses: list[str]) -> Text:
        text = Text()
        for i, use in enumerate(uses):
            if i:
                text.append(", ")
            text.append(use, style=USE_STYLES.get(use, ""))
        return text

    def _format_names(self, names: list[str]) -> str:
        if not names:
            return "-"
        return "\n".join(names)
