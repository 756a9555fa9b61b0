"""Decryption boundary for encrypted secrets.

Only typed ``DecryptError`` subclasses escape this package.
"""

from __future__ import annotations

from .gpg import (
    DecryptError,
    InvalidEncoding,
    NoData,
    OtherFailure,
    WrongPassword,
    classify_gpg_failure,
    decrypt,
    parse_status_output,
)

__all__ = [
    "DecryptError",
    "WrongPassword",
    "NoData",
    "InvalidEncoding",
    "OtherFailure",
    "classify_gpg_failure",
    "parse_status_output",
    "decrypt",
]
