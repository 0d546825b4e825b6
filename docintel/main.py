import argparse
import json
import sys
from dataclasses import asdict
from datetime import datetime
from enum import Enum
from pathlib import Path

from docintel.config.settings import Settings
from docintel.logging.logger import Log
from docintel.processor.file_loader import FileLoader
from docintel.processor.models import BatchProgress
from docintel.processor.service import build_service


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docintel",
        description="Extract and fuse property data from scanned documents.",
    )
    parser.add_argument("files", nargs="*", type=Path, help="Image or PDF files, in batch order")
    parser.add_argument("--output", type=Path, help="Write the JSON outcome here instead of stdout")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only test connectivity to the OCR and AI services",
    )
    return parser.parse_args(argv)


def _json_default(value: object) -> object:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _report_progress(progress: BatchProgress) -> None:
    Log.info(f"[{progress.index}/{progress.total}] {progress.file_name}")


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build service -> process files -> print JSON."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)
    service = build_service(settings)

    if args.check:
        checks = service.check_connections()
        for check in checks:
            status = "OK" if check.success else "FAILED"
            Log.info(f"{check.service}: {status} - {check.message}")
            if check.error:
                Log.error(f"{check.service}: {check.error}")
        return 0 if all(check.success for check in checks) else 1

    if not args.files:
        Log.error("No files given")
        return 1

    documents = FileLoader().load_all(args.files)
    outcome = service.process_and_fuse(documents, progress=_report_progress)
    payload = json.dumps(asdict(outcome), default=_json_default, ensure_ascii=False, indent=2)

    if args.output is not None:
        args.output.write_text(payload, encoding="utf-8")
        Log.info(f"Wrote outcome for {len(outcome.results)} documents to {args.output}")
    else:
        sys.stdout.write(payload + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
