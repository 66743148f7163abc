import logging
import os
import stat
from pathlib import Path
from typing import Iterator, Optional

from sigcheck.core.exceptions import ScanRootError
from sigcheck.core.file_validation import HEADER_SIZE, classify, file_extension
from sigcheck.repositories.report_repository_interface import IReportRepository
from sigcheck.repositories.signature_repository_interface import ISignatureRepository
from sigcheck.schemas.scan import Classification, ClassificationOutcome, ScanReport
from sigcheck.schemas.signature import SignatureTable

logger = logging.getLogger(__name__)


def walk_files(root: Path) -> Iterator[Path]:
    """
    Yield every non-directory entry under root, in os.walk order.

    Directory symlinks are not followed. Directories that cannot be listed
    are logged and skipped.
    """

    def _on_error(err: OSError) -> None:
        logger.warning("Cannot list directory %s: %s", err.filename, err.strerror)

    for dirpath, _dirnames, filenames in os.walk(root, onerror=_on_error):
        for filename in filenames:
            yield Path(dirpath) / filename


def read_header(path: Path, size: int = HEADER_SIZE) -> bytes:
    """Read up to size bytes from the start of the file."""
    with open(path, "rb") as f:
        return f.read(size)


class ScanService:
    """
    Walks a directory tree and flags files whose magic number does not
    match their extension.

    Both repositories are injected so the scan can run against an
    in-memory table or a mocked report sink in tests.
    """

    def __init__(
        self,
        signature_repository: ISignatureRepository,
        report_repository: IReportRepository,
        header_size: int = HEADER_SIZE,
    ) -> None:
        self.signature_repository = signature_repository
        self.report_repository = report_repository
        self.header_size = header_size
        self._signatures: Optional[SignatureTable] = None

    @property
    def signatures(self) -> SignatureTable:
        # Loaded on first use, then fixed for the life of the service
        if self._signatures is None:
            self._signatures = self.signature_repository.load()
        return self._signatures

    def classify_file(self, path: Path) -> Optional[ClassificationOutcome]:
        """
        Produce the outcome for one traversal entry.

        Returns None for entries that are not classified at all: anything
        that is not a regular file, and files without an extension.
        """
        try:
            mode = path.stat().st_mode
        except OSError as e:
            # Broken symlinks land here too
            logger.warning("Cannot stat %s: %s", path, e)
            return ClassificationOutcome(
                path=path, classification=Classification.UNREADABLE
            )
        if not stat.S_ISREG(mode):
            logger.debug("Skipping non-regular entry %s", path)
            return None

        try:
            header = read_header(path, self.header_size)
        except OSError as e:
            logger.warning("Failed to open %s: %s", path, e)
            return ClassificationOutcome(
                path=path, classification=Classification.UNREADABLE
            )

        extension = file_extension(path.name)
        if extension is None:
            logger.debug("Skipping %s: no extension", path)
            return None

        classification = classify(self.signatures.signatures, header, extension)
        logger.debug("%s: %s", path, classification.value)
        return ClassificationOutcome(path=path, classification=classification)

    def scan(self, root: Path) -> ScanReport:
        root = Path(root)
        if not root.is_dir():
            raise ScanRootError(f"Scan root {root} is not a directory")

        # Fail on a bad rule file before touching the tree
        signatures = self.signatures
        logger.info("Scanning %s with %d signatures", root, len(signatures))

        report = ScanReport()
        for path in walk_files(root):
            outcome = self.classify_file(path)
            if outcome is None:
                report.record_skipped()
                continue
            report.record(outcome)

        logger.info(
            "Scan finished. Scanned: %d | Mismatches: %d | Failed to open: %d | Skipped: %d",
            report.scanned,
            len(report.mismatching_extensions),
            len(report.failed_to_open),
            report.skipped,
        )
        return report

    def run(self, root: Path) -> ScanReport:
        """Scan root and hand the report to the report repository."""
        report = self.scan(root)
        self.report_repository.write(report)
        return report
