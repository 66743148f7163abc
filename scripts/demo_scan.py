"""Build a small example tree and run a scan over it."""
from pathlib import Path

from sigcheck.core.config import Settings
from sigcheck.core.dependencies import get_scan_service
from sigcheck.main import configure_logging

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def make_example(root: Path) -> None:
    (root / "nested").mkdir(parents=True, exist_ok=True)
    (root / "a.png").write_bytes(PNG_MAGIC + b"\x00" * 16)
    (root / "b.png").write_bytes(b"\x00\x00\x00\x00")
    (root / "report.pdf").write_bytes(b"%PDF-1.7\n")
    (root / "nested" / "invoice.pdf").write_bytes(b"PK\x03\x04 actually a zip")
    (root / "nested" / "tiny.jpg").write_bytes(b"\xff")
    (root / "notes.txt").write_text("no rule for txt\n")
    (root / "noext").write_bytes(b"\x00\x00")


def test_scan() -> None:
    print("\n" + "=" * 50)
    print("🔍 Scanning example tree")
    print("=" * 50)

    config = Settings()
    make_example(config.SCAN_ROOT)
    configure_logging(config.DEBUG)

    report = get_scan_service(config).run(config.SCAN_ROOT)

    print(f"\n📂 Root:           {config.SCAN_ROOT}")
    print(f"📄 Scanned:        {report.scanned}")
    print(f"⏭️  Skipped:        {report.skipped}")

    if report.mismatching_extensions:
        print(f"\n🚨 Mismatching extensions ({len(report.mismatching_extensions)}):")
        for path in report.mismatching_extensions:
            print(f"   - {path}")
    else:
        print("\n✅ No mismatches found")

    if report.failed_to_open:
        print(f"\n⚠️  Failed to open ({len(report.failed_to_open)}):")
        for path in report.failed_to_open:
            print(f"   - {path}")

    print("\n" + "=" * 50)
    print(f"📝 Report written to {config.REPORT_PATH}")
    print("=" * 50 + "\n")


if __name__ == "__main__":
    test_scan()
