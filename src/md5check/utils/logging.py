"""Logging configuration and utilities."""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

# Create module logger
logger = logging.getLogger("md5check")


def setup_logging(
    level: str = "WARNING",
    log_file: Path | None = None,
    verbose: bool = False,
) -> None:
    """Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional path to log file.
        verbose: If True, log debug information with timestamps.
    """
    log_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(logging.DEBUG if log_file else log_level)

    # Clear existing handlers
    logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    # Format - simpler for console
    if verbose:
        console_format = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    else:
        console_format = logging.Formatter("%(message)s")

    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler if specified
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # Always verbose in file

        file_format = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)


class OperationLogger:
    """Audit trail of checksum operations as JSON Lines."""

    def __init__(self, log_path: Path | None = None) -> None:
        """Initialize operation logger.

        Args:
            log_path: Path to JSONL log file. Nothing is written when None.
        """
        self.log_path = log_path
        if log_path:
            log_path.parent.mkdir(parents=True, exist_ok=True)

    def _write(self, entry: dict[str, Any]) -> None:
        if not self.log_path:
            return
        entry = {"timestamp": datetime.now().isoformat(), **entry}
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_operation(
        self,
        operation: str,
        target: str,
        success: bool,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Log operation with structured data.

        Args:
            operation: Operation name (compute, verify).
            target: File or manifest path the operation applied to.
            success: Whether operation succeeded.
            details: Additional details.
        """
        if success:
            logger.debug(f"{operation}: {target} - ok")
        else:
            logger.debug(f"{operation}: {target} - failed")

        self._write(
            {
                "operation": operation,
                "target": target,
                "success": success,
                "details": details or {},
            }
        )

    def log_error(
        self,
        operation: str,
        target: str,
        error: Exception,
    ) -> None:
        """Log an operation that raised.

        Args:
            operation: Operation that failed.
            target: File or manifest path.
            error: Exception that occurred.
        """
        details = {
            "error_type": type(error).__name__,
            "error_message": str(error),
        }

        self.log_operation(operation, target, success=False, details=details)
        logger.debug(f"{operation} failed for {target}: {error}")

    def log_run_start(self, operation: str, count: int) -> None:
        """Log start of a run over several files.

        Args:
            operation: Operation name.
            count: Number of files or manifests given.
        """
        logger.info(f"Starting {operation}: {count} file(s)")
        self._write({"event": "run_start", "operation": operation, "count": count})

    def log_run_complete(
        self,
        operation: str,
        succeeded: int,
        failed: int,
        duration_seconds: float,
    ) -> None:
        """Log completion of a run.

        Args:
            operation: Operation name.
            succeeded: Number of successful items.
            failed: Number of failed items.
            duration_seconds: Total processing time.
        """
        logger.info(
            f"{operation} complete: {succeeded} ok, {failed} failed in {duration_seconds:.2f}s"
        )
        self._write(
            {
                "event": "run_complete",
                "operation": operation,
                "succeeded": succeeded,
                "failed": failed,
                "duration_seconds": duration_seconds,
            }
        )
