import logging
import re
from pathlib import Path

from sigcheck.core.exceptions import SignatureParseError, SignatureSourceError
from sigcheck.repositories.signature_repository_interface import ISignatureRepository
from sigcheck.schemas.signature import Signature, SignatureTable

logger = logging.getLogger(__name__)

_HEX_TOKEN = re.compile(r"[0-9A-Fa-f]+")


def _parse_hex_byte(token: str) -> int:
    if not _HEX_TOKEN.fullmatch(token):
        raise ValueError(f"{token!r} is not a hex byte")
    value = int(token, 16)
    if value > 0xFF:
        raise ValueError(f"{token!r} does not fit in a byte")
    return value


def parse_signature_line(
    line: str, line_number: int = 1, *, trim_extensions: bool = True
) -> Signature:
    """
    Parse one "XX XX XX : ext1,ext2" rule.

    The line is split on the first colon. With trim_extensions=False the
    extension names are kept exactly as split, spaces included.
    """
    magic_part, colon, ext_part = line.partition(":")
    if not colon:
        raise SignatureParseError(line_number, line, "missing ':' separator")

    try:
        magic_number = bytes(_parse_hex_byte(token) for token in magic_part.split())
    except ValueError as e:
        raise SignatureParseError(line_number, line, str(e)) from e
    if not magic_number:
        raise SignatureParseError(line_number, line, "no magic bytes before ':'")

    extensions = ext_part.split(",")
    if trim_extensions:
        extensions = [ext.strip() for ext in extensions]

    return Signature(magic_number=magic_number, extensions=tuple(extensions))


def parse_signatures(text: str, *, trim_extensions: bool = True) -> SignatureTable:
    """
    Parse a whole rule file. Blank lines are ignored; any other bad line
    fails the load, there is no partial table.
    """
    signatures: list[Signature] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        signatures.append(
            parse_signature_line(line, line_number, trim_extensions=trim_extensions)
        )
    return SignatureTable(signatures=tuple(signatures))


class FileSignatureRepository(ISignatureRepository):

    def __init__(self, path: Path, trim_extensions: bool = True) -> None:
        self.path = Path(path)
        self.trim_extensions = trim_extensions

    def load(self) -> SignatureTable:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SignatureSourceError(
                f"Failed to open signature file {self.path}: {e}"
            ) from e

        table = parse_signatures(text, trim_extensions=self.trim_extensions)
        logger.info("Loaded %d signatures from %s", len(table), self.path)
        if logger.isEnabledFor(logging.DEBUG):
            for signature in table.signatures:
                logger.debug("Signature: %s", signature)
            logger.debug("Extensions with rules: %s", ", ".join(sorted(table.extensions)))
        return table
