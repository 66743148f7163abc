from abc import ABC, abstractmethod

from sigcheck.schemas.scan import ScanReport


class IReportRepository(ABC):

    @abstractmethod
    def write(self, report: ScanReport) -> None:
        raise NotImplementedError
