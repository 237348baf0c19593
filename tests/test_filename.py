import pytest

from safename import SanitizeOptions, safe_filename
from safename.utils.filename import clean_extension, reserve_extension


def test_appends_extension():
    assert safe_filename("report: Q3", "pdf") == "report Q3.pdf"
    assert safe_filename("report", ".pdf") == "report.pdf"


def test_without_extension_matches_sanitize():
    assert safe_filename(" CON ") == "file"
    assert safe_filename("a!b", replace="_") == "a_b"


def test_extension_counts_towards_length():
    name = safe_filename("a" * 500, "txt")
    assert len(name) == 255
    assert name.endswith("a.txt")


def test_extension_on_top_of_padding():
    assert len(safe_filename("a" * 500, "md", {"padding": 10})) == 245


def test_clean_extension():
    assert clean_extension(None) == ""
    assert clean_extension("") == ""
    assert clean_extension("..tar.gz") == ".tar.gz"
    assert clean_extension(" p d f ") == ".pdf"
    assert clean_extension("p?df") == ".pdf"
    assert clean_extension("p?df", "_") == ".p_df"
    assert clean_extension("???") == ""


def test_reserve_extension():
    options, suffix = reserve_extension(SanitizeOptions(padding=1), "json")
    assert suffix == ".json"
    assert options.padding == 6

    options, suffix = reserve_extension(SanitizeOptions(), None)
    assert suffix == ""
    assert options == SanitizeOptions()


@pytest.mark.parametrize("length,extension", [(3, "json"), (4, "txt"), (4, ".txt"), (10, "a" * 20)])
def test_extension_without_room_is_rejected(length, extension):
    with pytest.raises(ValueError):
        safe_filename("a" * 500, extension, length=length)


def test_extension_with_room_for_one_character():
    assert safe_filename("a" * 500, "txt", length=5) == "a.txt"
    assert safe_filename("abc", "txt", length=10, padding=5) == "a.txt"


def test_extension_with_unusable_length_uses_default_length():
    name = safe_filename("a" * 500, "txt", length=0)
    assert len(name) == 255
    assert name.endswith(".txt")
