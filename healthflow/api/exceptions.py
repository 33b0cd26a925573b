from healthflow.processor.exceptions import ProcessorError


class InvalidUploadError(ProcessorError):
    """Raised before the pipeline runs when the upload itself is unacceptable."""

    status_code = 400


class NoFileUploadedError(InvalidUploadError):
    category = "No file uploaded"

    def __init__(self) -> None:
        super().__init__("Please upload a PDF file")


class InvalidFileTypeError(InvalidUploadError):
    category = "Invalid file type"

    def __init__(self, mime_type: str) -> None:
        super().__init__("Only PDF files are allowed")
        self.mime_type = mime_type


class FileTooLargeError(InvalidUploadError):
    category = "File too large"

    def __init__(self, size_bytes: int, max_size_bytes: int) -> None:
        max_mb = max_size_bytes / (1024 * 1024)
        super().__init__(
            f"The uploaded file is {size_bytes} bytes; the limit is {max_mb:g}MB",
            suggestion="Try compressing the PDF or splitting it into smaller sections.",
        )
        self.size_bytes = size_bytes
        self.max_size_bytes = max_size_bytes
