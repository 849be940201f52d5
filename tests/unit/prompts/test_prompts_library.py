from pathlib import Path

import pytest
from pydantic import ValidationError

from reader_kit.prompts.prompt import Prompt
from reader_kit.prompts.prompts_library import PromptsLibrary


@pytest.fixture
def prompts_dir(tmp_path: Path) -> Path:
    """Create a temp directory with sample YAML prompt files."""
    (tmp_path / "explain.yaml").write_text(
        """name: explain
version: "1.0"
description: Explain a passage
inputs:
  text: The selected passage
template: Explain "{{ text }}"
""",
        encoding="utf-8",
    )

    # Same prompt, newer version
    (tmp_path / "explain_v2.yaml").write_text(
        """name: explain
version: "2.0"
description: Explain a passage for a given audience
inputs:
  text: The selected passage
  audience: Who the explanation is for
template: Explain "{{ text }}" to {{audience}}
""",
        encoding="utf-8",
    )

    (tmp_path / "summarize.yaml").write_text(
        """name: summarize
version: "1.0"
description: Summarize a chapter
inputs:
  chapter_title: Title of the chapter
  text: Chapter text
template: |
  Summarize {{ chapter_title }}:
  {{ text }}
""",
        encoding="utf-8",
    )

    return tmp_path


class TestPromptsLibrary:
    def test_loads_prompts_from_directory(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        assert len(library.list()) == 3

    def test_get_prompt_by_name_and_version(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(prompts_dir)

        prompt = library.get("explain", "1.0")

        assert prompt.name == "explain"
        assert prompt.description == "Explain a passage"
        assert prompt.inputs == {"text": "The selected passage"}
        assert prompt.template == 'Explain "{{ text }}"'

    def test_latest_picks_highest_version(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(prompts_dir)

        assert library.latest("explain").version == "2.0"

    def test_get_raises_keyerror_for_unknown_version(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(prompts_dir)

        with pytest.raises(KeyError, match="Prompt 'explain' version '9.9' not found"):
            library.get("explain", "9.9")

    def test_latest_raises_keyerror_for_unknown_prompt(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(prompts_dir)

        with pytest.raises(KeyError, match="Prompt 'unknown' not found"):
            library.latest("unknown")

    def test_empty_directory_loads_no_prompts(self, tmp_path: Path) -> None:
        assert PromptsLibrary(tmp_path).list() == []

    def test_default_library_has_reader_actions(self) -> None:
        library = PromptsLibrary.default()

        names = {name for name, _ in library.list()}
        assert {"summarize", "explain", "translate"} <= names


class TestPromptRender:
    def test_fills_placeholders(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(prompts_dir).get("explain", "2.0")

        assert prompt.render(text="风起", audience="kids") == 'Explain "风起" to kids'

    def test_multiline_template(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(prompts_dir).get("summarize", "1.0")

        rendered = prompt.render(chapter_title="第一章", text="甲\n乙")

        assert rendered == "Summarize 第一章:\n甲\n乙\n"

    def test_missing_input_raises(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(prompts_dir).get("explain", "2.0")

        with pytest.raises(ValueError, match="missing inputs: audience"):
            prompt.render(text="x")

    def test_braces_in_values_are_not_expanded(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(prompts_dir).get("explain", "1.0")

        assert prompt.render(text="{{ text }}") == 'Explain "{{ text }}"'

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            Prompt(
                name="p",
                version="1",
                description="d",
                inputs={},
                template="t",
                author="someone",  # type: ignore[call-arg]
            )
