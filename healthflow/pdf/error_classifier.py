from healthflow.pdf.exceptions import ExtractionErrorKind

# Checked in order; the first family with a matching keyword wins.
_KEYWORD_FAMILIES: tuple[tuple[ExtractionErrorKind, tuple[str, ...]], ...] = (
    (ExtractionErrorKind.CORRUPTED_STRUCTURE, ("xref",)),
    (ExtractionErrorKind.ENCRYPTED, ("encrypted", "password")),
    (ExtractionErrorKind.INVALID_FORMAT, ("invalid", "format")),
    (ExtractionErrorKind.TOO_LARGE_OR_COMPLEX, ("memory", "size")),
)


def classify_extraction_error(message: str) -> ExtractionErrorKind:
    """Map a parser failure message to the user-facing error kind."""
    lowered = (message or "").lower()
    for kind, keywords in _KEYWORD_FAMILIES:
        if any(keyword in lowered for keyword in keywords):
            return kind
    return ExtractionErrorKind.UNKNOWN
