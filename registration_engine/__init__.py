"""
Registration validation helpers (minimal, flat layout)

Public API:
- types.Person, types.PersonAttribute, types.PersonAttributeType
- types.PersonAddress, types.AddressTemplate, types.AddressTemplateRegistry
- types.ValidationErrors, types.Rejection
- attributes.get_attribute
- coordinates.is_valid_latitude / is_valid_longitude
- address_validation.validate_latitude_and_longitude_if_necessary
"""

from .types import (
    AddressTemplate,
    AddressTemplateRegistry,
    Person,
    PersonAddress,
    PersonAttribute,
    PersonAttributeType,
    Rejection,
    ValidationErrors,
)
from .exceptions import AddressTemplateError, RegistrationError
from .attributes import PersonService, get_attribute
from .coordinates import (
    DEFAULT_LATITUDE_REGEX,
    DEFAULT_LONGITUDE_REGEX,
    is_valid_latitude,
    is_valid_longitude,
)
from .address_validation import (
    LATITUDE_INVALID_CODE,
    LONGITUDE_INVALID_CODE,
    validate_latitude_and_longitude_if_necessary,
)

__all__ = [
    "AddressTemplate",
    "AddressTemplateRegistry",
    "Person",
    "PersonAddress",
    "PersonAttribute",
    "PersonAttributeType",
    "Rejection",
    "ValidationErrors",
    "AddressTemplateError",
    "RegistrationError",
    "PersonService",
    "get_attribute",
    "DEFAULT_LATITUDE_REGEX",
    "DEFAULT_LONGITUDE_REGEX",
    "is_valid_latitude",
    "is_valid_longitude",
    "LATITUDE_INVALID_CODE",
    "LONGITUDE_INVALID_CODE",
    "validate_latitude_and_longitude_if_necessary",
]
