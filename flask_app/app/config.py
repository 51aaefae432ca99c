"""
config.py

Address template configuration for the registration app.

Templates come from a JSON file (ADDRESS_TEMPLATE_PATH) holding either one
template object or a list of them; the first template is the default. Without
a file, DEFAULT_ADDRESS_TEMPLATE is used, which has an empty override map so
the built-in coordinate formats apply.
"""
import json
import logging
import os

from dotenv import load_dotenv

from registration_engine.exceptions import AddressTemplateError
from registration_engine.types import AddressTemplate, AddressTemplateRegistry

logger = logging.getLogger(__name__)

DEFAULT_ADDRESS_TEMPLATE = AddressTemplate(
    name="default",
    name_mappings={
        "address1": "Location.address1",
        "cityVillage": "Location.cityVillage",
        "stateProvince": "Location.stateProvince",
        "country": "Location.country",
        "postalCode": "Location.postalCode",
        "latitude": "Location.latitude",
        "longitude": "Location.longitude",
    },
    element_regex={},
    line_by_line_format=[
        "address1",
        "cityVillage stateProvince country postalCode",
        "latitude longitude",
    ],
)

# JSON key -> AddressTemplate attribute
_TEMPLATE_KEYS = {
    "name": "name",
    "nameMappings": "name_mappings",
    "sizeMappings": "size_mappings",
    "elementDefaults": "element_defaults",
    "elementRegex": "element_regex",
    "elementRegexFormats": "element_regex_formats",
    "lineByLineFormat": "line_by_line_format",
}


_MAPPING_KEYS = ("nameMappings", "sizeMappings", "elementDefaults", "elementRegex", "elementRegexFormats")


def _check_mapping(key, value):
    if not isinstance(value, dict):
        raise AddressTemplateError(f"Address template '{key}' must be an object, got {type(value).__name__}")
    for name, item in value.items():
        if item is not None and not isinstance(item, str):
            raise AddressTemplateError(
                f"Address template '{key}.{name}' must be a string, got {type(item).__name__}"
            )


def template_from_dict(data: dict) -> AddressTemplate:
    """
    Build an AddressTemplate from its JSON form. Wrongly typed values raise
    AddressTemplateError here rather than failing later during validation.
    """
    if not isinstance(data, dict):
        raise AddressTemplateError(f"Address template must be an object, got {type(data).__name__}")
    unknown = set(data) - set(_TEMPLATE_KEYS)
    if unknown:
        logger.warning(f"⚠️ Ignoring unknown address template keys: {sorted(unknown)}")

    if "name" in data and not isinstance(data["name"], str):
        raise AddressTemplateError(f"Address template 'name' must be a string, got {type(data['name']).__name__}")
    for key in _MAPPING_KEYS:
        if key not in data:
            continue
        # null elementRegex means "no override map"
        if key == "elementRegex" and data[key] is None:
            continue
        _check_mapping(key, data[key])
    if "lineByLineFormat" in data:
        lines = data["lineByLineFormat"]
        if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
            raise AddressTemplateError("Address template 'lineByLineFormat' must be a list of strings")

    kwargs = {attr: data[key] for key, attr in _TEMPLATE_KEYS.items() if key in data}
    return AddressTemplate(**kwargs)


def load_address_templates(path: str | None = None) -> AddressTemplateRegistry:
    """
    Build the template registry from a JSON file, or the built-in default when
    no path is given. Raises AddressTemplateError for unreadable files.
    """
    if not path:
        logger.info("✅ No address template file configured; using default template.")
        return AddressTemplateRegistry(templates=[DEFAULT_ADDRESS_TEMPLATE])

    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        raise AddressTemplateError(f"Cannot read address templates from {path}: {e}") from e

    items = data if isinstance(data, list) else [data]
    templates = [template_from_dict(item) for item in items]
    if not templates:
        raise AddressTemplateError(f"No address templates found in {path}")

    logger.info(f"✅ Loaded {len(templates)} address template(s) from {path}")
    return AddressTemplateRegistry(templates=templates)


def load_config(overrides: dict | None = None) -> dict:
    """
    Collect settings from the environment (.env honoured) plus overrides.
    """
    load_dotenv()
    config = {
        "DATABASE_URL": os.getenv("DATABASE_URL"),
        "ADDRESS_TEMPLATE_PATH": os.getenv("ADDRESS_TEMPLATE_PATH"),
    }
    config.update(overrides or {})
    return config
