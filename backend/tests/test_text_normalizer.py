import pytest

from services.text_normalizer import clean_extracted, normalize


def test_normalize_empty():
    assert normalize("") == ""
    assert normalize(None) == ""


def test_normalize_strips_nul_bytes():
    assert normalize("Jane\x00 Doe") == "Jane Doe"


def test_normalize_trailing_whitespace_before_newline():
    assert normalize("Skills   \nPython\t\nGit") == "Skills\nPython\nGit"


def test_normalize_collapses_blank_runs():
    assert normalize("Education\n\n\n\n\nExperience") == "Education\n\nExperience"


def test_normalize_keeps_single_blank_line():
    assert normalize("Education\n\nExperience") == "Education\n\nExperience"


def test_normalize_trims_ends():
    assert normalize("\n\n  Summary\n  ") == "Summary"


@pytest.mark.parametrize("text", [
    "",
    "plain",
    "a  \n\n\n\nb\x00c \t\n",
    "  \n\n\n  lead\n\ntrail   \n\n\n",
    "tabs\t\t\n\n\n\nand  spaces  ",
])
def test_normalize_is_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once


def test_clean_extracted_removes_whitespace_only_lines():
    raw = "John Doe  \n   \n \nEngineer\r\nSkills"
    assert clean_extracted(raw) == "John Doe\nEngineer\nSkills"


def test_clean_extracted_handles_none():
    assert clean_extracted(None) == ""
