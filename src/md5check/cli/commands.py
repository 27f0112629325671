"""CLI commands using Typer."""

import time
from pathlib import Path
from typing import Optional

import typer

from md5check.cli.config import Config, load_config, validate_config
from md5check.cli.output import RichOutput
from md5check.utils.hashing import compute_digest, compute_file_digest, format_line
from md5check.utils.logging import OperationLogger, logger, setup_logging
from md5check.utils.manifest import ManifestVerifier, display_path

STDIN_PATH = "-"

app = typer.Typer(
    name="md5check",
    help="Compute and check MD5 message digests.",
    add_completion=False,
)
output = RichOutput()


def get_config(config_path: Optional[Path]) -> Config:
    """Load configuration, printing any issues as warnings.

    Args:
        config_path: Optional path to config file.

    Returns:
        Config object.
    """
    config = load_config(config_path)
    issues = validate_config(config)

    if issues:
        for issue in issues:
            output.print_warning(issue)

    return config


@app.command()
def main(
    files: Optional[list[str]] = typer.Argument(
        None,
        metavar="[FILE]...",
        help="Files to hash, or manifests with --check. Reads standard input when omitted.",
        show_default=False,
    ),
    binary: bool = typer.Option(
        False,
        "--binary",
        "-b",
        help="Read in binary mode",
    ),
    check: bool = typer.Option(
        False,
        "--check",
        "-c",
        help="Read MD5 sums from the FILEs and check them",
    ),
    text: bool = typer.Option(
        False,
        "--text",
        "-t",
        help="Read in text mode (default)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Don't print OK for each successfully verified file",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit non-zero for improperly formatted checksum lines",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to config file",
    ),
) -> None:
    """Print or check MD5 (128-bit) checksums."""
    config = get_config(config_path)
    setup_logging(
        level=config.logging.level,
        log_file=config.logging.log_file,
        verbose=verbose,
    )
    operation_logger = OperationLogger(config.logging.audit_log)

    if check:
        ok = _check_manifests(
            files or [],
            quiet=quiet or config.check.quiet,
            strict=strict or config.check.strict,
            operation_logger=operation_logger,
        )
    else:
        binary_mode = (binary or config.output.binary) and not text
        ok = _compute_digests(files or [], binary_mode, operation_logger)

    if not ok:
        raise typer.Exit(1)


def _compute_digests(
    files: list[str],
    binary: bool,
    operation_logger: OperationLogger,
) -> bool:
    """Print a checksum line for each file.

    Args:
        files: Files to hash. Standard input is hashed when empty.
        binary: Use the binary mode character.
        operation_logger: Audit log.

    Returns:
        True if every file was hashed.
    """
    if not files:
        digest = compute_digest(typer.get_binary_stream("stdin"))
        operation_logger.log_operation("compute", STDIN_PATH, success=True, details={"digest": digest})
        typer.echo(digest)
        return True

    start = time.monotonic()
    operation_logger.log_run_start("compute", len(files))
    failed = 0

    for path in files:
        try:
            if path == STDIN_PATH:
                digest = compute_digest(typer.get_binary_stream("stdin"))
            else:
                digest = compute_file_digest(Path(path))
        except OSError as e:
            output.print_error(f"failed to open {display_path(path)}: {e.strerror or e}")
            operation_logger.log_error("compute", path, e)
            failed += 1
            continue

        operation_logger.log_operation("compute", path, success=True, details={"digest": digest})
        typer.echo(format_line(digest, display_path(path), binary))

    operation_logger.log_run_complete(
        "compute",
        succeeded=len(files) - failed,
        failed=failed,
        duration_seconds=time.monotonic() - start,
    )
    return failed == 0


def _check_manifests(
    manifests: list[str],
    quiet: bool,
    strict: bool,
    operation_logger: OperationLogger,
) -> bool:
    """Verify each manifest in turn.

    Args:
        manifests: Manifest files to check.
        quiet: Don't print OK lines.
        strict: Treat improperly formatted lines as failures.
        operation_logger: Audit log.

    Returns:
        True if every manifest opened and every entry verified.
    """
    if not manifests:
        output.print_error("--check requires at least one manifest file")
        return False

    start = time.monotonic()
    operation_logger.log_run_start("verify", len(manifests))
    verifier = ManifestVerifier(quiet=quiet, operation_logger=operation_logger)
    succeeded = 0

    for manifest_path in manifests:
        try:
            summary = verifier.verify(manifest_path)
        except OSError as e:
            output.print_error(f"{display_path(manifest_path)}: {e.strerror or e}")
            operation_logger.log_error("verify", manifest_path, e)
            continue

        logger.debug(
            f"{display_path(manifest_path)}: {summary.matched} ok, {summary.mismatched} failed, "
            f"{summary.unreadable} unreadable, {summary.malformed} malformed"
        )
        output.print_summary(summary)

        manifest_ok = summary.all_ok and not (strict and summary.malformed)
        operation_logger.log_operation(
            "verify",
            manifest_path,
            success=manifest_ok,
            details=summary.to_dict(),
        )
        if manifest_ok:
            succeeded += 1

    operation_logger.log_run_complete(
        "verify",
        succeeded=succeeded,
        failed=len(manifests) - succeeded,
        duration_seconds=time.monotonic() - start,
    )
    return succeeded == len(manifests)
