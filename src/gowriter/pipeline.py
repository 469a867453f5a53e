"""
Formatter pipeline: run generated code through external formatter processes.

Generated documents can be far larger than an OS pipe buffer. Writing all of
stdin before reading stdout would block forever once the formatter stalls on
a full stdout pipe, so stdin is fed while stdout and stderr are drained, all
three on a small thread pool.
"""

import subprocess
from concurrent.futures import ThreadPoolExecutor
from typing import IO, Iterable, Optional

from gowriter.logging_config import logger
from gowriter.config import FormatterStep
from gowriter.exceptions import FormatterProcessError


def _feed(stream: IO[bytes], payload: bytes) -> None:
    try:
        stream.write(payload)
    finally:
        stream.close()


def _drain(stream: IO[bytes]) -> bytes:
    return stream.read()


def _decode(data: Optional[bytes]) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def apply_code_formatter(code: str, command: str, *args: str) -> str:
    """
    Pipe ``code`` through ``command args...`` and return its stdout.

    Args:
        code: Full text handed to the formatter on stdin
        command: Executable name or path
        *args: Command line arguments

    Returns:
        The formatter's stdout, decoded as UTF-8

    Raises:
        FormatterProcessError: The process could not be spawned, exited with a
            non-zero status, or one of its streams failed.
    """
    full_command = [command, *args]
    command_line = " ".join(full_command)

    try:
        process = subprocess.Popen(
            full_command,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        logger.error(f"Formatter '{command_line}' could not be started: {e}")
        raise FormatterProcessError(command_line, str(e)) from e

    with process:
        # Leaving the pool joins the feeder and both drains.
        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="gowriter-fmt") as executor:
            feeding = executor.submit(_feed, process.stdin, code.encode("utf-8"))
            stdout_future = executor.submit(_drain, process.stdout)
            stderr_future = executor.submit(_drain, process.stderr)
        returncode = process.wait()

    stderr = _decode(None if stderr_future.exception() else stderr_future.result())

    if returncode != 0:
        logger.error(f"Formatter '{command_line}' exited with status {returncode}: {stderr}")
        raise FormatterProcessError(command_line, f"exit status {returncode}", stderr)

    for future in (feeding, stdout_future, stderr_future):
        error = future.exception()
        if error is not None:
            logger.error(f"Formatter '{command_line}' stream failure: {error}")
            raise FormatterProcessError(command_line, str(error), stderr) from error

    try:
        formatted = stdout_future.result().decode("utf-8")
    except UnicodeDecodeError as e:
        raise FormatterProcessError(command_line, str(e), stderr) from e

    logger.debug(f"Formatted {len(code)} chars with '{command_line}'")
    return formatted


def run_formatter_steps(code: str, steps: Iterable[FormatterStep]) -> str:
    """
    Apply each step in order, feeding every step the previous step's output.

    Args:
        code: Initial text
        steps: Formatter steps to apply

    Returns:
        Output of the last step (``code`` unchanged when there are no steps)
    """
    for step in steps:
        code = apply_code_formatter(code, step.command, *step.args)
    return code
