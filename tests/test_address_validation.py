import pytest

from registration_engine import (
    AddressTemplate,
    AddressTemplateError,
    AddressTemplateRegistry,
    LATITUDE_INVALID_CODE,
    LONGITUDE_INVALID_CODE,
    PersonAddress,
    ValidationErrors,
    validate_latitude_and_longitude_if_necessary,
)


def registry(element_regex):
    return AddressTemplateRegistry(templates=[AddressTemplate(element_regex=element_regex)])


def run(address, element_regex=None):
    errors = ValidationErrors()
    validate_latitude_and_longitude_if_necessary(address, errors, registry(element_regex))
    return errors


def test_invalid_latitude_rejected_once():
    errors = run(PersonAddress(latitude="91"), element_regex={})
    assert errors.codes() == [LATITUDE_INVALID_CODE]
    assert errors.rejections[0].field is None
    assert LATITUDE_INVALID_CODE == "registrationapp.latitude.invalid"


def test_invalid_longitude_rejected():
    errors = run(PersonAddress(longitude="181"), element_regex={})
    assert errors.codes() == [LONGITUDE_INVALID_CODE]
    assert LONGITUDE_INVALID_CODE == "registrationapp.longitude.invalid"


def test_both_fields_checked_independently():
    errors = run(PersonAddress(latitude="90.5", longitude="-200"), element_regex={})
    assert errors.codes() == [LATITUDE_INVALID_CODE, LONGITUDE_INVALID_CODE]


def test_valid_coordinates_no_rejection():
    errors = run(PersonAddress(latitude="-45.123", longitude="180.00"), element_regex={})
    assert len(errors) == 0
    assert not errors.has_errors()


def test_template_override_skips_default_check():
    errors = run(
        PersonAddress(latitude="not a latitude", longitude="181"),
        element_regex={"latitude": r"\d+", "longitude": "  "},
    )
    # latitude has its own regex; longitude override is blank so defaults apply
    assert errors.codes() == [LONGITUDE_INVALID_CODE]


def test_no_override_map_skips_checks():
    errors = run(PersonAddress(latitude="999", longitude="999"), element_regex=None)
    assert errors.codes() == []


@pytest.mark.parametrize("blank", [None, "", "   "])
def test_blank_values_not_checked(blank):
    errors = run(PersonAddress(latitude=blank, longitude=blank), element_regex={})
    assert errors.codes() == []


def test_padded_value_is_checked_as_is():
    errors = run(PersonAddress(latitude=" 45 "), element_regex={})
    assert errors.codes() == [LATITUDE_INVALID_CODE]


def test_none_address_leaves_collector_untouched():
    errors = ValidationErrors()
    errors.reject("some.other.code")
    validate_latitude_and_longitude_if_necessary(None, errors, AddressTemplateRegistry())
    assert errors.codes() == ["some.other.code"]


def test_only_first_template_used():
    reg = AddressTemplateRegistry(templates=[
        AddressTemplate(name="first", element_regex={"latitude": ".*"}),
        AddressTemplate(name="second", element_regex={}),
    ])
    errors = ValidationErrors()
    validate_latitude_and_longitude_if_necessary(PersonAddress(latitude="91"), errors, reg)
    assert errors.codes() == []


def test_empty_registry_is_configuration_error():
    with pytest.raises(AddressTemplateError):
        validate_latitude_and_longitude_if_necessary(
            PersonAddress(latitude="45"), ValidationErrors(), AddressTemplateRegistry()
        )


def test_reject_with_field_name():
    errors = ValidationErrors()
    errors.reject("registrationapp.latitude.invalid", field_name="latitude")
    assert errors.rejections[0].field == "latitude"
