from abc import ABC, abstractmethod

from sigcheck.schemas.signature import SignatureTable


class ISignatureRepository(ABC):

    @abstractmethod
    def load(self) -> SignatureTable:
        raise NotImplementedError
