"""Movie Schemas — field-level validation at the API boundary."""

import pytest
from pydantic import ValidationError

from movies_api.schemas.movie import MoviePatch, MovieResponse, MovieWrite


def test_write_requires_title():
    with pytest.raises(ValidationError):
        MovieWrite(year=1999)


def test_write_rejects_empty_title():
    with pytest.raises(ValidationError):
        MovieWrite(title="")


def test_write_keeps_whitespace_title_as_is():
    assert MovieWrite(title=" ").title == " "


def test_write_year_defaults_to_none():
    assert MovieWrite(title="Heat").year is None


@pytest.mark.parametrize("year, expected", [(1995, 1995), ("1995", 1995), (1995.0, 1995)])
def test_write_year_coerces_integral_values(year, expected):
    assert MovieWrite(title="Heat", year=year).year == expected


@pytest.mark.parametrize("year", ["nineteen", 1995.5, True, False])
def test_write_year_rejects_non_integers(year):
    with pytest.raises(ValidationError):
        MovieWrite(title="Heat", year=year)


def test_write_title_bounded_by_column_width():
    assert len(MovieWrite(title="x" * 255).title) == 255
    with pytest.raises(ValidationError):
        MovieWrite(title="x" * 256)


def test_write_rejects_numeric_title():
    with pytest.raises(ValidationError):
        MovieWrite(title=123)


@pytest.mark.parametrize("year", [2 ** 31, -(2 ** 31) - 1])
def test_year_bounded_by_integer_column(year):
    with pytest.raises(ValidationError):
        MovieWrite(title="Heat", year=year)
    with pytest.raises(ValidationError):
        MoviePatch(year=year)


def test_patch_all_fields_optional():
    patch = MoviePatch()
    assert patch.title is None
    assert patch.year is None


def test_patch_rejects_boolean_year():
    with pytest.raises(ValidationError):
        MoviePatch(year=True)


def test_patch_title_bounded_by_column_width():
    with pytest.raises(ValidationError):
        MoviePatch(title="x" * 256)


def test_response_reads_from_attributes():
    class _Row:
        id = 1
        title = "Heat"
        year = None

    assert MovieResponse.model_validate(_Row()).model_dump() == {
        "id": 1, "title": "Heat", "year": None,
    }
