"""Rich console output for diagnostics and summaries."""

from rich.console import Console
from rich.markup import escape

from md5check.models.checksum import VerificationSummary


class RichOutput:
    """Diagnostic output on stderr.

    Result lines (digests, OK/FAILED) are plain text on stdout and never pass
    through here, so redirecting stdout keeps them machine-readable.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize with Rich console.

        Args:
            console: Rich Console instance. Defaults to a stderr console.
        """
        self.console = console or Console(stderr=True, highlight=False)

    def print_summary(self, summary: VerificationSummary) -> None:
        """Print GNU-style warnings for a verified manifest.

        Args:
            summary: Verification summary.
        """
        if summary.malformed:
            self.print_warning(
                f"{summary.malformed} {self._plural(summary.malformed, 'line is', 'lines are')} "
                f"improperly formatted"
            )
        if summary.unreadable:
            self.print_warning(
                f"{summary.unreadable} listed {self._plural(summary.unreadable, 'file', 'files')} "
                f"could not be read"
            )
        if summary.mismatched:
            self.print_warning(
                f"{summary.mismatched} computed "
                f"{self._plural(summary.mismatched, 'checksum', 'checksums')} did NOT match"
            )

    def print_error(self, message: str, details: str | None = None) -> None:
        """Display error message.

        Args:
            message: Error message.
            details: Optional additional details.
        """
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)
        if details:
            self.console.print(f"[dim]{escape(details)}[/dim]", soft_wrap=True)

    def print_warning(self, message: str) -> None:
        """Display warning message.

        Args:
            message: Warning message.
        """
        self.console.print(f"[bold yellow]WARNING:[/bold yellow] {escape(message)}", soft_wrap=True)

    def _plural(self, count: int, singular: str, plural: str) -> str:
        return singular if count == 1 else plural
