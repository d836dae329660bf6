from pathlib import Path

from tripdoc.vision.exceptions import VisionExtractionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_prompt(path: Path | None = None) -> str:
    """Load the OCR system instruction.

    Args:
        path: Path to the prompt file.
              Defaults to the bundled ocr_system_prompt.txt.

    Raises:
        VisionExtractionError: if the file cannot be read.
    """
    return _load(path or _DEFAULT_PROMPT_DIR / "ocr_system_prompt.txt", "system prompt")


def load_user_prompt(path: Path | None = None) -> str:
    """Load the instruction text sent alongside the image."""
    return _load(path or _DEFAULT_PROMPT_DIR / "ocr_user_prompt.txt", "user prompt")


def _load(path: Path, label: str) -> str:
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise VisionExtractionError(f"Failed to load OCR {label}: {exc}") from exc
