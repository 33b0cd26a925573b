from pathlib import Path

from healthflow.ai.exceptions import AiServiceError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(name: str, path: Path | None = None) -> str:
    """Load a prompt template by file name.

    Args:
        name: File name inside the bundled prompts directory,
              e.g. ``classification_prompt.txt``.
        path: Explicit template path; overrides ``name`` when given.

    Returns:
        The raw template string with ``str.format`` placeholders.

    Raises:
        AiServiceError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AiServiceError(f"Failed to load prompt template: {exc}") from exc
