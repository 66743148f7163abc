import logging
import sys
from typing import Optional

from pydantic import ValidationError

from sigcheck.core.config import Settings
from sigcheck.core.dependencies import get_scan_service
from sigcheck.core.exceptions import SigcheckError

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    # stdout carries only the final status line
    app_log = logging.getLogger("sigcheck")
    app_log.setLevel(logging.DEBUG if debug else logging.INFO)
    if not app_log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        app_log.addHandler(handler)


def _fail(message: object) -> int:
    print(f"Program failed with error: {message}", file=sys.stderr)
    return 1


def main(config: Optional[Settings] = None) -> int:
    """
    Scan config.SCAN_ROOT and write the report to config.REPORT_PATH.

    Settings are read from the environment and .env when no config is
    given. Returns 0 on success and 1 when the settings are invalid, the
    scan could not run or the report could not be written.
    """
    if config is None:
        try:
            config = Settings()
        except ValidationError as e:
            return _fail(f"invalid settings: {e}")

    configure_logging(config.DEBUG)
    service = get_scan_service(config)
    try:
        report = service.run(config.SCAN_ROOT)
    except SigcheckError as e:
        logger.error("Scan aborted: %s", e)
        return _fail(e)

    if not report.has_findings:
        logger.info("No mismatching or unreadable files under %s", config.SCAN_ROOT)
    print("Program completed successfully")
    return 0


def start():
    sys.exit(main())


if __name__ == "__main__":
    start()
