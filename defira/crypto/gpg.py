"""Symmetric GnuPG decryption with typed failure classification.

Runs the ``gpg`` executable in batch mode with a loopback pinentry. The
passphrase travels over a private pipe and is never cached by the agent.
Status lines from ``--status-fd`` are mapped to ``DecryptError`` subclasses
so callers never see raw GnuPG codes.
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

GPG_BINARY = "gpg"
DECRYPT_TIMEOUT_SECONDS = 60.0
STATUS_PREFIX = "[GNUPG:] "

# GnuPG does not reliably tell a bad passphrase apart from a generic
# decryption failure for symmetric messages.
WRONG_PASSWORD_STATUS_CODES = frozenset({"BAD_PASSPHRASE", "DECRYPTION_FAILED"})


class DecryptError(Exception):
    """Base class for decryption failures shown to the user."""

    title = "Decryption failed"

    @property
    def user_message(self) -> str:
        return str(self)


class WrongPassword(DecryptError):
    def __init__(self) -> None:
        super().__init__("Incorrect password")


class NoData(DecryptError):
    def __init__(self) -> None:
        super().__init__("No data in encrypted file")


class InvalidEncoding(DecryptError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid UTF-8 in decrypted content: {detail}")


class OtherFailure(DecryptError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"GPG error: {detail}")


def parse_status_output(stderr_text: str) -> tuple[list[str], list[str]]:
    """Split gpg stderr into ``(status_codes, message_lines)``."""
    status_codes: list[str] = []
    message_lines: list[str] = []
    for raw_line in stderr_text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith(STATUS_PREFIX):
            keyword = line[len(STATUS_PREFIX):].split(" ", 1)[0]
            if keyword:
                status_codes.append(keyword)
            continue
        message_lines.append(line)
    return status_codes, message_lines


def classify_gpg_failure(status_codes: list[str], message_lines: list[str], returncode: int) -> DecryptError:
    """Map GnuPG status codes from a failed run to a typed error."""
    if any(code in WRONG_PASSWORD_STATUS_CODES for code in status_codes):
        return WrongPassword()
    if message_lines:
        detail = message_lines[-1]
        if detail.startswith("gpg: "):
            detail = detail[len("gpg: "):]
        return OtherFailure(detail)
    if "NODATA" in status_codes:
        return OtherFailure("no valid OpenPGP data found")
    return OtherFailure(f"gpg exited with status {returncode}")


def _gpg_command(gpg_binary: str, passphrase_fd: int, homedir: Path | None) -> list[str]:
    command = [gpg_binary]
    if homedir is not None:
        command += ["--homedir", str(homedir)]
    command += [
        "--batch",
        "--no-tty",
        "--quiet",
        "--pinentry-mode",
        "loopback",
        "--no-symkey-cache",
        "--passphrase-fd",
        str(passphrase_fd),
        "--status-fd",
        "2",
        "--decrypt",
    ]
    return command


def _run_gpg_decrypt(
    ciphertext: bytes,
    password: bytes | bytearray,
    gpg_binary: str,
    homedir: Path | None,
    timeout_seconds: float,
) -> subprocess.CompletedProcess[bytes]:
    read_fd, write_fd = os.pipe()
    try:
        try:
            os.write(write_fd, password)
            os.write(write_fd, b"\n")
        finally:
            os.close(write_fd)
        return subprocess.run(
            _gpg_command(gpg_binary, read_fd, homedir),
            input=ciphertext,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            pass_fds=(read_fd,),
            check=False,
            timeout=timeout_seconds,
        )
    finally:
        os.close(read_fd)


def decrypt(
    ciphertext: bytes,
    password: str | bytes | bytearray,
    *,
    gpg_binary: str = GPG_BINARY,
    homedir: Path | None = None,
    timeout_seconds: float = DECRYPT_TIMEOUT_SECONDS,
) -> str:
    """Decrypt a symmetrically encrypted OpenPGP blob into text.

    Raises ``WrongPassword``, ``NoData``, ``InvalidEncoding`` or
    ``OtherFailure``. Each call is independent: nothing is retried and the
    passphrase is not retained.
    """
    if isinstance(password, str):
        password = password.encode("utf-8")

    try:
        proc = _run_gpg_decrypt(ciphertext, password, gpg_binary, homedir, timeout_seconds)
    except FileNotFoundError as exc:
        raise OtherFailure(f"gpg executable not found: {gpg_binary}") from exc
    except subprocess.TimeoutExpired as exc:
        raise OtherFailure(f"gpg timed out after {timeout_seconds:g}s") from exc
    except OSError as exc:
        raise OtherFailure(str(exc)) from exc

    stderr_text = proc.stderr.decode("utf-8", errors="replace")
    status_codes, message_lines = parse_status_output(stderr_text)
    if proc.returncode != 0:
        error = classify_gpg_failure(status_codes, message_lines, proc.returncode)
        logger.debug("gpg failed with status %d (codes: %s)", proc.returncode, ", ".join(status_codes))
        raise error

    plaintext = proc.stdout
    if not plaintext:
        raise NoData()
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncoding(str(exc)) from exc
