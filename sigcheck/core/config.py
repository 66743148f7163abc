from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SIGCHECK_",
        extra="ignore",
    )
    APP_NAME: str = "sigcheck"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    # Directory tree to scan
    SCAN_ROOT: Path = Path("./example")
    # Text report written at the end of the scan
    REPORT_PATH: Path = Path("output.txt")
    # Rule file, one "XX XX : ext1,ext2" signature per line
    SIGNATURES_PATH: Path = Path("extensions.txt")
    # Bytes read from the start of every file. Signatures longer than this never match.
    HEADER_SIZE: int = Field(default=20, ge=1)
    # Strip spaces around extension names ("89 50 : png" registers "png", not " png")
    TRIM_EXTENSIONS: bool = True
