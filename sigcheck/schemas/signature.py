from pydantic import BaseModel, ConfigDict, Field


class Signature(BaseModel):
    """A magic number and the extensions it is expected under."""

    model_config = ConfigDict(frozen=True)

    magic_number: bytes = Field(min_length=1)
    extensions: tuple[str, ...] = Field(min_length=1)

    def applies_to(self, extension: str) -> bool:
        return extension in self.extensions

    def __str__(self) -> str:
        hex_bytes = " ".join(f"{b:02X}" for b in self.magic_number)
        return f"{hex_bytes} : {','.join(self.extensions)}"


class SignatureTable(BaseModel):
    """
    Signatures in rule-file order.

    Order matters: when several entries claim the same extension only the
    first one is ever used, so this stays a tuple and is never re-keyed
    into a dict.
    """

    model_config = ConfigDict(frozen=True)

    signatures: tuple[Signature, ...] = ()

    def __len__(self) -> int:
        return len(self.signatures)

    @property
    def extensions(self) -> set[str]:
        return {ext for sig in self.signatures for ext in sig.extensions}
