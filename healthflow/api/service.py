from typing import Any

from healthflow.api.responses import error_response, success_response
from healthflow.api.upload import validate_upload
from healthflow.logging.logger import Log
from healthflow.processor.exceptions import ProcessorError
from healthflow.processor.processor import Processor


class AnalyzeService:
    """Entry point for one upload: gate it, run the pipeline, shape the response."""

    def __init__(self, processor: Processor, max_upload_size_bytes: int) -> None:
        self._processor = processor
        self._max_upload_size_bytes = max_upload_size_bytes

    def handle(
        self,
        filename: str | None,
        mime_type: str | None,
        content: bytes | None,
    ) -> tuple[int, dict[str, Any]]:
        try:
            document = validate_upload(
                filename, mime_type, content, self._max_upload_size_bytes
            )
            report = self._processor.process(document)
        except ProcessorError as exc:
            Log.warning(f"Request rejected ({exc.category}): {exc.message}")
            return error_response(exc)
        except Exception as exc:
            Log.exception(f"Unexpected error while analyzing {filename}: {exc}")
            return error_response(exc)
        return success_response(report)
