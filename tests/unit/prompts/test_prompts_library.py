from pathlib import Path

import pytest
from pydantic import ValidationError

from transcript_kit.prompts.prompt import Prompt
from transcript_kit.prompts.prompts_library import PromptsLibrary


@pytest.fixture
def prompts_dir(tmp_path: Path) -> Path:
    """Create a temp directory with sample YAML prompt files."""
    (tmp_path / "title.yaml").write_text(
        """name: title
version: "1.0"
description: Suggest a title for a recording
inputs:
  transcript: Transcript text
template: "Suggest a title for: {{ transcript }}"
"""
    )

    (tmp_path / "title_v2.yaml").write_text(
        """name: title
version: "2.0"
description: Suggest a title in a given language
inputs:
  transcript: Transcript text
  language: Output language, may be empty
template: "Title{% if language %} in {{ language }}{% endif %}: {{ transcript }}"
"""
    )

    (tmp_path / "action_items.yaml").write_text(
        """name: action_items
version: "1.0"
description: Extract action items
inputs:
  summary: Summary markdown
template: |
  List the action items in:
  {{ summary }}
"""
    )

    return tmp_path


class TestPromptsLibrary:
    def test_loads_prompts_from_directory(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        assert len(library.list()) == 3

    def test_accepts_path_objects(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(prompts_dir)

        assert ("action_items", "1.0") in library.list()

    def test_get_prompt_by_name_and_version(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        prompt = library.get("title", "1.0")

        assert prompt.name == "title"
        assert prompt.version == "1.0"
        assert prompt.inputs == {"transcript": "Transcript text"}

    def test_get_defaults_to_version_one(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        assert library.get("title").version == "1.0"

    def test_get_raises_keyerror_for_unknown_prompt(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        with pytest.raises(KeyError, match="Prompt 'unknown' version '1.0' not found"):
            library.get("unknown", "1.0")

    def test_list_is_sorted(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        assert library.list() == [
            ("action_items", "1.0"),
            ("title", "1.0"),
            ("title", "2.0"),
        ]

    def test_empty_directory_loads_no_prompts(self, tmp_path: Path) -> None:
        assert PromptsLibrary(str(tmp_path)).list() == []

    def test_unknown_fields_are_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "bad.yaml").write_text(
            'name: bad\nversion: "1.0"\ndescription: x\ninputs: {}\ntemplate: x\nextra: 1\n'
        )

        with pytest.raises(ValidationError):
            PromptsLibrary(str(tmp_path))


class TestBundledPrompts:
    def test_default_library_has_summarization_prompts(self) -> None:
        library = PromptsLibrary.default()

        for name in ("summarize_system", "summarize_transcript", "map_chunk", "reduce_summaries"):
            assert isinstance(library.get(name, "1.0"), Prompt)

    def test_system_prompt_requests_parseable_headings(self) -> None:
        prompt = PromptsLibrary.default().get("summarize_system")

        rendered = prompt.render(content_type="meeting", guidance="", language=None)

        assert "## EXECUTIVE SUMMARY" in rendered
        assert "## KEY TAKEAWAYS" in rendered
        assert "IMPORTANT" not in rendered

    def test_system_prompt_language_instruction(self) -> None:
        prompt = PromptsLibrary.default().get("summarize_system")

        rendered = prompt.render(content_type="lecture", guidance="Focus.", language="Italian")

        assert "Write the summary in Italian" in rendered
        assert "Focus." in rendered


class TestPromptRender:
    def test_renders_inputs(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(str(prompts_dir)).get("title", "2.0")

        assert prompt.render(transcript="hello", language="French") == "Title in French: hello"
        assert prompt.render(transcript="hello", language=None) == "Title: hello"

    def test_missing_input_raises(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(str(prompts_dir)).get("title", "2.0")

        with pytest.raises(ValueError, match="missing inputs: language"):
            prompt.render(transcript="hello")

    def test_prompt_is_immutable(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(str(prompts_dir)).get("title", "1.0")

        with pytest.raises(ValidationError):
            prompt.name = "other"  # type: ignore[misc]
