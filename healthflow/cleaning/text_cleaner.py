"""Heuristic reformatting of raw PDF text into readable markdown.

Rules run in a fixed order; later rules rely on the whitespace normalization
and line breaks introduced by earlier ones. Output is deterministic but not
idempotent: cleaning already-cleaned text may promote headings twice.
"""

import re

_WHITESPACE_RUN = re.compile(r"\s+")
_SENTENCE_BREAK = re.compile(r"\.\s+([A-Z])")

_PATIENT_LABEL = re.compile(
    r"\b(PATIENT|NAME|DOB|DATE OF BIRTH|AGE|GENDER|SEX|TEST DATE|REPORT DATE|DOCTOR|PHYSICIAN)"
    r":\s*",
    re.IGNORECASE,
)

_STATUSES = "Normal|Abnormal|High|Low|Critical"
# Reference-range fragments are left for the annotation rule.
_TEST_RESULT = re.compile(
    r"(?<!\()(?<!(?i:reference) )\b(?!(?i:reference\s+range))"
    r"(?P<label>[A-Z][A-Za-z ]+):\s*"
    r"(?P<value>\d+(?:[.,]\d+)*(?:/\d+(?:[.,]\d+)*)*)"
    rf"(?:\s*(?P<unit>(?!(?:{_STATUSES})\b)[a-zA-Z%][a-zA-Z%/]*))?"
    rf"(?:\s+(?P<status>{_STATUSES}))?(?![A-Za-z])"
)

_NUMERIC_RANGE = r"(\d+(?:\.\d+)?)\s*-\s*(\d+(?:\.\d+)?)"
_REF_PARENTHETICAL = re.compile(r"\(Ref[^)]*\)", re.IGNORECASE)
_REF_RANGE = re.compile(r"Reference\s+Range[^0-9()\n*]*" + _NUMERIC_RANGE, re.IGNORECASE)
_RANGE_IN_TEXT = re.compile(_NUMERIC_RANGE)

_SECTIONS = (
    "COMPLETE BLOOD COUNT|CBC|LIPID PROFILE|LIVER FUNCTION|KIDNEY FUNCTION"
    "|THYROID FUNCTION|DIABETES|BLOOD SUGAR|CHOLESTEROL|HEMOGLOBIN|BLOOD PRESSURE"
)
# An uppercase section title running into a test label, e.g. "LIPID PROFILE Total Cholesterol".
_LEADING_SECTION = re.compile(rf"(?:{_SECTIONS})\s+(?=[A-Za-z])")

# Bold spans are matched first so labels such as "**Hemoglobin:**" stay intact.
_SECTION_OR_BOLD = re.compile(
    r"(?P<bold>\*\*[^*\n]*\*\*)"
    rf"|\b(?P<section>{_SECTIONS})\b",
    re.IGNORECASE,
)

_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")
_UPPERCASE_LINE = re.compile(r"^(?=[A-Z ]*[A-Z])([A-Z ]{5,})$", re.MULTILINE)


class TextCleaner:
    """Turns raw extracted report text into structured markdown-like text."""

    def clean(self, raw_text: str) -> str:
        if not raw_text:
            return ""
        text = _WHITESPACE_RUN.sub(" ", raw_text).strip()
        text = _SENTENCE_BREAK.sub(r".\n\n\1", text)
        text = _PATIENT_LABEL.sub(r"\n\n**\1:** ", text)
        text = _TEST_RESULT.sub(self._format_test_result, text)
        text = self._annotate_reference_ranges(text)
        text = _SECTION_OR_BOLD.sub(self._format_section, text)
        text = self._normalize_line_breaks(text)
        text = _UPPERCASE_LINE.sub(r"## \1", text)
        return text.strip()

    @staticmethod
    def _format_test_result(match: re.Match[str]) -> str:
        fields = [
            match.group("value"),
            match.group("unit") or "",
            match.group("status") or "",
        ]
        rendered = " ".join(f for f in fields if f)
        label = match.group("label").strip()
        section = _LEADING_SECTION.match(label)
        prefix = ""
        if section is not None:
            prefix, label = label[: section.end()], label[section.end():]
        return f"{prefix}\n- **{label}:** {rendered}"

    @staticmethod
    def _annotate_reference_ranges(text: str) -> str:
        def parenthetical(match: re.Match[str]) -> str:
            bounds = _RANGE_IN_TEXT.search(match.group(0))
            if bounds is None:
                return " *(Reference Range)*"
            return f" *(Normal: {bounds.group(1)}-{bounds.group(2)})*"

        text = _REF_PARENTHETICAL.sub(parenthetical, text)
        return _REF_RANGE.sub(r" *(Normal: \1-\2)*", text)

    @staticmethod
    def _format_section(match: re.Match[str]) -> str:
        if match.group("bold") is not None:
            return match.group("bold")
        return f"\n\n## {match.group('section')}\n"

    @staticmethod
    def _normalize_line_breaks(text: str) -> str:
        lines = [line.strip() for line in text.split("\n")]
        return _EXCESS_BLANK_LINES.sub("\n\n", "\n".join(lines))
