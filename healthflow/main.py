import argparse
import json
import mimetypes
import sys
from pathlib import Path

from healthflow.api.service import AnalyzeService
from healthflow.config.settings import Settings
from healthflow.logging.logger import Log
from healthflow.processor.processor import build_processor


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="healthflow",
        description="Summarize a medical report PDF in plain language.",
    )
    parser.add_argument("path", type=Path, help="PDF file to analyze")
    parser.add_argument(
        "--mime-type",
        default=None,
        help="Declared MIME type (guessed from the file name when omitted)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build pipeline -> analyze one file -> print JSON."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    content = args.path.read_bytes()
    mime_type = args.mime_type or mimetypes.guess_type(args.path.name)[0]

    service = AnalyzeService(build_processor(settings), settings.max_upload_size_bytes)
    status, body = service.handle(args.path.name, mime_type, content)
    json.dump(body, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0 if status == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
