"""Tests for phone number validation backed by phonenumbers."""

import pytest

from src.phonebook.core.services.contacts import LibPhoneNumberValidator


@pytest.mark.parametrize(
    "phone_number",
    ["+972536260988", "+16502530000", "+41446681800", " +972536260988 "],
)
def test_international_numbers_are_valid(phone_number):
    assert LibPhoneNumberValidator().validate(phone_number) is True


@pytest.mark.parametrize("phone_number", ["invalid", "", "   ", None, "123", 972536260988])
def test_malformed_numbers_are_invalid(phone_number):
    assert LibPhoneNumberValidator().validate(phone_number) is False


def test_national_number_needs_a_default_region():
    assert LibPhoneNumberValidator().validate("053-626-0988") is False
    assert LibPhoneNumberValidator(default_region="IL").validate("053-626-0988") is True
