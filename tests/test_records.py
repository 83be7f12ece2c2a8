import pytest

from fmark.errors import EmptyField, MalformedLine, ValidationError
from fmark.records import Record, parse_line, render_line


def test_parse_line_trims_padding():
    r = parse_line("{T}Arch Wiki     {C}Reference   {U}https://wiki.archlinux.org/", 1)
    assert r == Record("Arch Wiki", "Reference", "https://wiki.archlinux.org/")


def test_parse_line_tolerates_ragged_whitespace():
    r = parse_line("   {T}  Go {C}Dev{U}   https://go.dev  \n", 4)
    assert r == Record("Go", "Dev", "https://go.dev")


def test_parse_line_keeps_inner_whitespace():
    r = parse_line("{T}Project's  Github {C}Dev Tools {U}x", 1)
    assert r.title == "Project's  Github"
    assert r.category == "Dev Tools"


@pytest.mark.parametrize(
    "line",
    [
        "{T}a {C}b",
        "{T}a {U}c",
        "{C}b {U}c",
        "{T}a {U}c {C}b",
        "{C}b {T}a {U}c",
        "junk {T}a {C}b {U}c",
        "{T}a {C}b {U}c {U}d",
        "just some text",
    ],
)
def test_parse_line_rejects_malformed(line):
    with pytest.raises(MalformedLine) as info:
        parse_line(line, 7)
    assert info.value.line_number == 7
    assert info.value.raw_text == line


@pytest.mark.parametrize(
    "line, field",
    [
        ("{T}   {C}b {U}c", "title"),
        ("{T}a {C} {U}c", "category"),
        ("{T}a {C}b {U}   ", "url"),
    ],
)
def test_parse_line_rejects_empty_field(line, field):
    with pytest.raises(EmptyField) as info:
        parse_line(line, 3)
    assert info.value.field_name == field
    assert "line 3" in str(info.value)


def test_render_line_pads_title_and_category_only():
    r = Record("Rust Programming", "Programming", "https://www.rust-lang.org/")
    line = render_line(r, 20, 15)
    assert line == (
        "{T}Rust Programming     {C}Programming     {U}https://www.rust-lang.org/"
    )


def test_render_line_without_widths():
    r = Record("Project's Github", "Development", "https://github.com/vannrr/fmark")
    assert render_line(r) == (
        "{T}Project's Github {C}Development {U}https://github.com/vannrr/fmark"
    )


def test_create_trims_fields():
    r = Record.create("  Title ", "\tCat", "url  ")
    assert r == Record("Title", "Cat", "url")


@pytest.mark.parametrize(
    "fields, name",
    [
        (("", "c", "u"), "title"),
        (("t", "   ", "u"), "category"),
        (("t", "c", None), "url"),
        (("a {C} b", "c", "u"), "title"),
        (("t", "{U}", "u"), "category"),
        (("t", "c", "u\nv"), "url"),
    ],
)
def test_create_rejects_invalid_fields(fields, name):
    with pytest.raises(ValidationError) as info:
        Record.create(*fields)
    assert info.value.field_name == name


def test_url_is_not_format_checked():
    assert Record.create("t", "c", "not a url at all").url == "not a url at all"


def test_sort_key_is_category_then_title():
    assert Record("b", "A", "u").sort_key < Record("a", "B", "u").sort_key
    assert Record("Zed", "A", "u").sort_key < Record("alpha", "A", "u").sort_key
