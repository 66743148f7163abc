"""
File content validation using magic bytes.
Flags files whose leading bytes do not match the signature registered for
their extension.
"""
from typing import Iterable, Optional

from sigcheck.schemas.scan import Classification
from sigcheck.schemas.signature import Signature

HEADER_SIZE = 20


def file_extension(name: str) -> Optional[str]:
    """
    Return the text after the last dot of a file name, without the dot.

    Dotfiles like ".bashrc" and names without a dot have no extension.
    "archive." has the empty extension "".
    """
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return None
    return extension


def find_signature(
    signatures: Iterable[Signature], extension: str
) -> Optional[Signature]:
    """First signature in table order that claims the extension."""
    for signature in signatures:
        if signature.applies_to(extension):
            return signature
    return None


def magic_number_match(magic_number: bytes, header: bytes) -> bool:
    """
    Return True if header starts with magic_number.
    A header shorter than the magic number never matches.
    """
    return len(header) >= len(magic_number) and header[: len(magic_number)] == magic_number


def classify(
    signatures: Iterable[Signature], header: bytes, extension: str
) -> Classification:
    """
    Classify a file header against the signature for its extension.

    Only the first entry declaring the extension is consulted. Extensions
    with no entry are never flagged.
    """
    signature = find_signature(signatures, extension)
    if signature is None:
        return Classification.MATCHED  # unknown extension, skip check
    if magic_number_match(signature.magic_number, header):
        return Classification.MATCHED
    return Classification.MISMATCHED
