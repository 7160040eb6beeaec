from pathlib import Path

from docintel.analysis.exceptions import AnalysisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

LANGUAGE_NAMES = {"en": "English", "ml": "Malayalam"}


def load_prompt_template(path: Path | None = None) -> str:
    """Load the analysis prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled analysis_prompt.txt.

    Returns:
        The raw template string with ``str.format`` placeholders.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "analysis_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load prompt template: {exc}") from exc


def build_prompt(
    template: str,
    *,
    content: str,
    file_name: str,
    language: str,
    max_content_chars: int = 4000,
) -> str:
    language_name = LANGUAGE_NAMES.get(language, LANGUAGE_NAMES["en"])
    excerpt = content[:max_content_chars]
    if len(content) > max_content_chars:
        excerpt += "..."
    return template.format(
        language_instruction=f"Please provide the analysis in {language_name} language.",
        summary_language=language_name,
        file_name=file_name,
        content=excerpt,
    )
