from datetime import date, datetime

import pytest

from src.domain import license_number
from src.domain.entities import Sex
from src.domain.license_number import InvalidLicenseInput

NATIONAL_ID = "3201011505900001"


def test_encode_male_layout():
    number = license_number.encode(NATIONAL_ID, Sex.male, date(1990, 5, 15), 1)

    assert number == "3201011505900001"
    assert len(number) == 16


def test_encode_female_adds_forty_to_day():
    number = license_number.encode("3201015708950002", "female", date(1995, 8, 17), 23)

    assert number[6:8] == "57"
    assert number == "3201015708950023"


def test_encode_pads_single_digit_parts():
    number = license_number.encode(NATIONAL_ID, Sex.male, date(2005, 1, 2), 7)

    assert number == "3201010201050007"


def test_decode_recovers_parts():
    decoded = license_number.decode("3201015708950023")

    assert decoded.region == "320101"
    assert decoded.day == 17
    assert decoded.month == 8
    assert decoded.year2digit == 95
    assert decoded.sex == Sex.female
    assert decoded.sequence == 23


def test_decode_reads_century_as_twenty_first():
    decoded = license_number.decode("3201011505900001")

    assert decoded.year == 2090


@pytest.mark.parametrize(
    "sex,birth_date,sequence",
    [
        (Sex.male, date(1990, 5, 15), 1),
        (Sex.female, date(2001, 12, 31), 9999),
        (Sex.female, date(2000, 2, 29), 40),
    ],
)
def test_round_trip(sex, birth_date, sequence):
    number = license_number.encode(NATIONAL_ID, sex, birth_date, sequence)
    decoded = license_number.decode(number)

    assert decoded.region == NATIONAL_ID[:6]
    assert (decoded.day, decoded.month) == (birth_date.day, birth_date.month)
    assert decoded.year2digit == birth_date.year % 100
    assert decoded.sex == sex
    assert decoded.sequence == sequence
    assert decoded.base_pattern == number[:12]


def test_base_pattern_is_number_without_sequence():
    pattern = license_number.base_pattern(NATIONAL_ID, Sex.male, date(1990, 5, 15))

    assert pattern == "320101150590"
    assert len(pattern) == license_number.BASE_PATTERN_LENGTH


@pytest.mark.parametrize(
    "national_id",
    ["320101150590000", "32010115059000011", "32010115059000a1", "", None, "３２０１０１１５０５９００００１"],
)
def test_encode_rejects_bad_national_id(national_id):
    with pytest.raises(InvalidLicenseInput, match="National ID"):
        license_number.encode(national_id, Sex.male, date(1990, 5, 15), 1)


def test_encode_rejects_unknown_sex():
    with pytest.raises(InvalidLicenseInput, match="Sex"):
        license_number.encode(NATIONAL_ID, "other", date(1990, 5, 15), 1)


@pytest.mark.parametrize("birth_date", ["1990-05-15", None, datetime(1990, 5, 15, 10, 30)])
def test_encode_rejects_non_date_birth_date(birth_date):
    with pytest.raises(InvalidLicenseInput, match="Birth date"):
        license_number.encode(NATIONAL_ID, Sex.male, birth_date, 1)


@pytest.mark.parametrize("sequence", [0, 10000, -1, 1.0, "1", True])
def test_encode_rejects_bad_sequence(sequence):
    with pytest.raises(InvalidLicenseInput, match="Sequence"):
        license_number.encode(NATIONAL_ID, Sex.male, date(1990, 5, 15), sequence)


@pytest.mark.parametrize("number", ["123", "32010115059000011", "320101150590000x", "", None, "3201011505900001\n"])
def test_decode_rejects_malformed_numbers(number):
    with pytest.raises(InvalidLicenseInput):
        license_number.decode(number)


def test_is_valid():
    assert license_number.is_valid("3201011505900001")
    assert not license_number.is_valid("3201011505")
    assert not license_number.is_valid(None)


def test_sequence_of():
    assert license_number.sequence_of("3201011505900042") == 42
