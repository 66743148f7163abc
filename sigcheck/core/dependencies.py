from sigcheck.core.config import Settings
from sigcheck.repositories.report_repository import FileReportRepository
from sigcheck.repositories.report_repository_interface import IReportRepository
from sigcheck.repositories.signature_repository import FileSignatureRepository
from sigcheck.repositories.signature_repository_interface import ISignatureRepository
from sigcheck.services.scan_service import ScanService


def get_signature_repository(config: Settings) -> ISignatureRepository:
    return FileSignatureRepository(
        config.SIGNATURES_PATH,
        trim_extensions=config.TRIM_EXTENSIONS,
    )


def get_report_repository(config: Settings) -> IReportRepository:
    return FileReportRepository(config.REPORT_PATH)


def get_scan_service(config: Settings) -> ScanService:
    return ScanService(
        get_signature_repository(config),
        get_report_repository(config),
        header_size=config.HEADER_SIZE,
    )
