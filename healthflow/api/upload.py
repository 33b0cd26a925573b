from healthflow.api.exceptions import FileTooLargeError, InvalidFileTypeError, NoFileUploadedError
from healthflow.processor.models import UploadedDocument

PDF_MIME_TYPE = "application/pdf"


def validate_upload(
    filename: str | None,
    mime_type: str | None,
    content: bytes | None,
    max_size_bytes: int,
) -> UploadedDocument:
    """Check an upload against the hard constraints and wrap it.

    Raises:
        NoFileUploadedError: no file name or no content.
        InvalidFileTypeError: MIME type is not application/pdf.
        FileTooLargeError: content exceeds ``max_size_bytes``.
    """
    if not filename or not content:
        raise NoFileUploadedError()
    normalized_type = (mime_type or "").split(";", 1)[0].strip().lower()
    if normalized_type != PDF_MIME_TYPE:
        raise InvalidFileTypeError(mime_type or "")
    if len(content) > max_size_bytes:
        raise FileTooLargeError(len(content), max_size_bytes)
    return UploadedDocument(
        filename=filename,
        content=content,
        size_bytes=len(content),
        mime_type=normalized_type,
    )
