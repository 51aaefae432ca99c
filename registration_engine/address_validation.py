import logging
from typing import Optional

from .coordinates import is_valid_latitude, is_valid_longitude
from .types import AddressTemplateRegistry, PersonAddress, ValidationErrors

logger = logging.getLogger(__name__)

LATITUDE_INVALID_CODE = "registrationapp.latitude.invalid"
LONGITUDE_INVALID_CODE = "registrationapp.longitude.invalid"


def is_blank(value: Optional[str]) -> bool:
    """None, empty, or whitespace only."""
    return value is None or not value.strip()


def _uses_default_format(element_regex, field_name: str) -> bool:
    # an override map must exist, and must leave this field without its own regex
    return element_regex is not None and is_blank(element_regex.get(field_name))


def validate_latitude_and_longitude_if_necessary(
    address: Optional[PersonAddress],
    errors: ValidationErrors,
    template_registry: AddressTemplateRegistry,
) -> None:
    """
    Check address coordinates against the default formats, unless the default
    address template supplies its own regex for that field.

    Rejections are added to `errors`:
      - "registrationapp.latitude.invalid"
      - "registrationapp.longitude.invalid"
    A bad latitude does not stop the longitude check.
    """
    if address is None:
        return

    template = template_registry.default_template()
    element_regex = template.element_regex

    if not is_blank(address.latitude):
        if _uses_default_format(element_regex, "latitude"):
            if not is_valid_latitude(address.latitude):
                logger.debug("Rejecting latitude %r", address.latitude)
                errors.reject(LATITUDE_INVALID_CODE)
        else:
            logger.debug("Template %r overrides latitude format; skipping default check", template.name)

    if not is_blank(address.longitude):
        if _uses_default_format(element_regex, "longitude"):
            if not is_valid_longitude(address.longitude):
                logger.debug("Rejecting longitude %r", address.longitude)
                errors.reject(LONGITUDE_INVALID_CODE)
        else:
            logger.debug("Template %r overrides longitude format; skipping default check", template.name)
