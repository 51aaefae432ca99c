from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .exceptions import AddressTemplateError


@dataclass
class PersonAttributeType:
    """
    Classification of a person attribute (e.g. phone number), keyed by uuid.
    """
    uuid: str
    name: str
    format: Optional[str] = None     # e.g. "java.lang.String"
    retired: bool = False


@dataclass
class PersonAttribute:
    attribute_type: PersonAttributeType
    value: str
    voided: bool = False


@dataclass
class Person:
    """
    Person record holding zero or more attributes.
    """
    person_id: Optional[int] = None
    attributes: List[PersonAttribute] = field(default_factory=list)

    def get_attribute(self, attribute_type: Optional[PersonAttributeType]) -> Optional[PersonAttribute]:
        """
        First non-voided attribute of the given type, matched on uuid.
        """
        if attribute_type is None:
            return None
        for attr in self.attributes:
            if attr.voided:
                continue
            if attr.attribute_type.uuid == attribute_type.uuid:
                return attr
        return None


@dataclass
class PersonAddress:
    """
    Address as captured from the registration form. Coordinates stay as raw text
    until validated.
    """
    address1: Optional[str] = None
    address2: Optional[str] = None
    city_village: Optional[str] = None
    state_province: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None


@dataclass
class AddressTemplate:
    """
    Address layout configuration. element_regex maps a field name to an override
    regex; None means the template defines no override map at all.
    """
    name: str = "default"
    name_mappings: Dict[str, str] = field(default_factory=dict)
    size_mappings: Dict[str, str] = field(default_factory=dict)
    element_defaults: Dict[str, str] = field(default_factory=dict)
    element_regex: Optional[Dict[str, str]] = None
    element_regex_formats: Dict[str, str] = field(default_factory=dict)
    line_by_line_format: List[str] = field(default_factory=list)


@dataclass
class AddressTemplateRegistry:
    """
    Configured address templates; the first one is the default.
    """
    templates: List[AddressTemplate] = field(default_factory=list)

    def default_template(self) -> AddressTemplate:
        if not self.templates:
            raise AddressTemplateError("No address template is configured")
        return self.templates[0]


@dataclass
class Rejection:
    code: str
    field: Optional[str] = None      # None => applies to the whole form


@dataclass
class ValidationErrors:
    """
    Collector for validation rejections, filled in by validators and read by the
    caller to decide how to surface them.
    """
    rejections: List[Rejection] = field(default_factory=list)

    def reject(self, code: str, field_name: Optional[str] = None) -> None:
        self.rejections.append(Rejection(code=code, field=field_name))

    def has_errors(self) -> bool:
        return bool(self.rejections)

    def codes(self) -> List[str]:
        return [r.code for r in self.rejections]

    def __len__(self) -> int:
        return len(self.rejections)
