#routes.py

import logging

from flask import Blueprint, current_app, jsonify, request

from registration_engine import (
    PersonAddress,
    ValidationErrors,
    get_attribute,
    validate_latitude_and_longitude_if_necessary,
)

logger = logging.getLogger(__name__)

# Define a Blueprint for routes
main_bp = Blueprint('main', __name__)

_ADDRESS_FIELDS = (
    "address1", "address2", "city_village", "state_province",
    "country", "postal_code", "latitude", "longitude",
)


# ✅ API Route for validating an address before it is accepted
@main_bp.route('/validate_address', methods=['POST'])
def validate_address():
    """Checks address coordinates and returns any rejection codes."""

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "Invalid request format. Must be a JSON object."}), 400

    values = {}
    for name in _ADDRESS_FIELDS:
        value = payload.get(name)
        if value is not None and not isinstance(value, str):
            return jsonify({"error": f"Field '{name}' must be a string"}), 400
        values[name] = value

    errors = ValidationErrors()
    validate_latitude_and_longitude_if_necessary(
        PersonAddress(**values),
        errors,
        current_app.extensions["address_templates"],
    )

    if errors.has_errors():
        logger.info(f"Address rejected: {errors.codes()}")
        return jsonify({"valid": False, "errors": errors.codes()}), 422

    return jsonify({"valid": True, "errors": []})


@main_bp.route('/person/<int:person_id>/attribute/<attribute_type_uuid>', methods=['GET'])
def person_attribute(person_id, attribute_type_uuid):
    """Returns the person's attribute value for the type uuid (null when absent)."""

    service = current_app.extensions["person_service"]
    person = service.get_person(person_id)
    value = get_attribute(person, attribute_type_uuid, service)

    return jsonify({
        "person_id": person_id,
        "attribute_type_uuid": attribute_type_uuid,
        "value": value,
    })
