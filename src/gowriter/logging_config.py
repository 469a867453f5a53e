import sys
import os
from loguru import logger

# Flag to track if logging has been configured
_logging_configured = False


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


def setup_logging(level="INFO", suppress_console=None, log_file=None, force=False):
    """
    Configures the global logger and enables gowriter's own messages.

    The package disables its logger on import so that host applications keep
    their sinks untouched; calling this function is the opt-in.

    Console logging goes to stderr unless suppressed. File logging is opt-in
    via the GOWRITER_LOG_FILE environment variable or the log_file argument.

    Args:
        level: Logging level (default: INFO)
        suppress_console: If True, suppress console logging. If None, check GOWRITER_MACHINE_MODE env var.
        log_file: Path of a log file to write to. If None, check GOWRITER_LOG_FILE env var.
        force: Reconfigure even if logging was already set up.
    """
    global _logging_configured

    # Only configure once to avoid duplicate handlers
    if _logging_configured and not force:
        return
    _logging_configured = True

    logger.remove()
    logger.enable("gowriter")

    if suppress_console is None:
        suppress_console = _env_flag("GOWRITER_MACHINE_MODE")

    if not suppress_console:
        logger.add(
            sys.stderr,
            level=level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            colorize=True
        )

    if log_file is None:
        log_file = os.getenv("GOWRITER_LOG_FILE") or None

    if log_file:
        logger.add(
            log_file,
            level=level,
            rotation="10 MB",
            retention="1 day",
            catch=True,
            serialize=False
        )
