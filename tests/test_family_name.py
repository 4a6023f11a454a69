import pytest

from fontcraft.family_name import FamilyName, GenericFamily, parse_family_list


@pytest.mark.parametrize(
    "text, generic",
    [
        ("serif", GenericFamily.SERIF),
        ("sans-serif", GenericFamily.SANS_SERIF),
        ("monospace", GenericFamily.MONOSPACE),
        ("cursive", GenericFamily.CURSIVE),
        ("fantasy", GenericFamily.FANTASY),
    ],
)
def test_parse_generic_keywords(text, generic):
    parsed = FamilyName.parse(text)
    assert parsed == FamilyName.generic_family(generic)
    assert parsed.is_generic
    assert str(parsed) == text


def test_parse_title_strips_quotes_and_space():
    assert FamilyName.parse("  'Times New Roman' ") == FamilyName.title("Times New Roman")


def test_quoted_keyword_is_still_generic():
    assert FamilyName.parse("'serif'") == FamilyName.generic_family(GenericFamily.SERIF)


def test_keywords_are_case_sensitive():
    parsed = FamilyName.parse("Serif")
    assert not parsed.is_generic
    assert parsed.name == "Serif"


def test_parse_family_list():
    families = parse_family_list("Times New Roman, Arial, serif")
    assert families == [
        FamilyName.title("Times New Roman"),
        FamilyName.title("Arial"),
        FamilyName.generic_family(GenericFamily.SERIF),
    ]


def test_generic_family_accepts_keyword_string():
    assert FamilyName.generic_family("monospace").generic is GenericFamily.MONOSPACE


def test_title_and_generic_are_exclusive():
    with pytest.raises(ValueError):
        FamilyName()
    with pytest.raises(ValueError):
        FamilyName(name="Arial", generic=GenericFamily.SERIF)


def test_family_names_are_hashable():
    names = {FamilyName.title("Arial"), FamilyName.title("Arial"), FamilyName.parse("serif")}
    assert len(names) == 2