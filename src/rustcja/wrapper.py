"""Command wrapper: run a compiler and translate its JSON stderr.

Intended for use as Cargo's ``RUSTC_WRAPPER``::

    RUSTC_WRAPPER=rustc-ja-wrapper cargo check

stdout is inherited untouched. stderr is read line by line and, when the
child was asked for ``--error-format=json``, each diagnostic line is
translated before being forwarded.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import BinaryIO, Sequence

from rustcja.config import JSON_ERROR_FORMAT_FLAG
from rustcja.engine.stream import convert_line
from rustcja.errors import OutputWriteError, WrapperError
from rustcja.phrases.table import PhraseTable

logger = logging.getLogger(__name__)

# Exit status reported when the child has none (killed by a signal)
FALLBACK_EXIT_CODE = 1


def wants_json_conversion(args: Sequence[str]) -> bool:
    """True if the child was asked for JSON diagnostics."""
    if JSON_ERROR_FORMAT_FLAG in args:
        return True
    # Two-token form: --error-format json
    return any(
        arg == "--error-format" and nxt == "json" for arg, nxt in zip(args, args[1:])
    )


def _forward(out: BinaryIO, line: bytes, command: str) -> None:
    try:
        out.write(line)
        out.flush()
    except OSError as e:
        raise OutputWriteError(command, str(e)) from e


def run_wrapped(
    command: str,
    args: Sequence[str],
    table: PhraseTable,
    out: BinaryIO | None = None,
) -> int:
    """Run ``command args...`` and forward its stderr to ``out``.

    Args:
        command: Program to run (e.g. path to rustc)
        args: Arguments passed through unchanged
        table: Phrase table used for translation
        out: Binary stream for stderr output (default: sys.stderr.buffer)

    Returns:
        The child's exit code (1 if it was terminated by a signal)

    Raises:
        WrapperError: If the command cannot be started
        OutputWriteError: If a line cannot be written to ``out``; the child
            is killed and reaped first
    """
    out = out if out is not None else sys.stderr.buffer
    args = list(args)
    convert = wants_json_conversion(args)

    logger.debug(f"REQUEST {command} {' '.join(args)}")

    try:
        proc = subprocess.Popen([command, *args], stderr=subprocess.PIPE)
    except OSError as e:
        raise WrapperError(command, str(e)) from e

    logger.debug("RESPONSE")
    try:
        with proc.stderr:
            for line in proc.stderr:
                logger.debug(line.decode("utf-8", errors="replace").rstrip("\r\n"))
                if convert:
                    line = convert_line(line, table)
                _forward(out, line, command)
    except BaseException:
        # Nobody is reading the child's output any more
        proc.kill()
        proc.wait()
        raise

    returncode = proc.wait()
    logger.debug(f"EXIT {returncode}")
    if returncode < 0:
        return FALLBACK_EXIT_CODE
    return returncode
