import logging
from pathlib import Path

from sigcheck.core.exceptions import ReportWriteError
from sigcheck.repositories.report_repository_interface import IReportRepository
from sigcheck.schemas.scan import ScanReport

logger = logging.getLogger(__name__)

MISMATCH_HEADING = "Mismatching extensions"
FAILED_HEADING = "Failed to open"
SECTION_GAP = "\n----------\n"


def render_report(report: ScanReport) -> str:
    """
    Render the plain-text report.

    The "Failed to open" section is only present when something failed.
    """
    parts = [f"{MISMATCH_HEADING}\n"]
    parts.extend(f"{path}\n" for path in report.mismatching_extensions)
    if report.failed_to_open:
        parts.append(SECTION_GAP)
        parts.append(f"{FAILED_HEADING}\n")
        parts.extend(f"{path}\n" for path in report.failed_to_open)
    return "".join(parts)


class FileReportRepository(IReportRepository):

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def write(self, report: ScanReport) -> None:
        try:
            # Undecodable filename bytes come back out unchanged
            with open(self.path, "w", encoding="utf-8", errors="surrogateescape") as f:
                f.write(render_report(report))
        except (OSError, UnicodeError) as e:
            raise ReportWriteError(f"Unable to write report {self.path}: {e}") from e
        logger.info("Report written to %s", self.path)
