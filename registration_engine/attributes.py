import logging
from typing import Optional, Protocol

from .types import Person, PersonAttributeType

logger = logging.getLogger(__name__)


class PersonService(Protocol):
    """
    Lookup service for person attribute types.
    """

    def get_person_attribute_type_by_uuid(self, uuid: str) -> Optional[PersonAttributeType]:
        ...


def get_attribute(
    person: Optional[Person],
    attribute_type_uuid: str,
    person_service: PersonService,
) -> Optional[str]:
    """
    Value of the person's attribute whose type has the given uuid.

    Returns None when the person is missing, the type does not resolve,
    or the person has no such attribute. Never raises for absent data.
    """
    if person is None:
        return None

    attribute_type = person_service.get_person_attribute_type_by_uuid(attribute_type_uuid)
    if attribute_type is None:
        logger.debug("No person attribute type for uuid=%s", attribute_type_uuid)

    attr = person.get_attribute(attribute_type)
    if attr is None:
        return None
    return attr.value
