#database.py

import logging

from sqlalchemy.exc import SQLAlchemyError

from registration_engine.types import Person, PersonAttribute, PersonAttributeType
from flask_app.app.sql_models import (
    PersonAttributeRecord,
    PersonAttributeTypeRecord,
    PersonRecord,
)

logger = logging.getLogger(__name__)


def _to_attribute_type(row: PersonAttributeTypeRecord) -> PersonAttributeType:
    return PersonAttributeType(
        uuid=row.uuid,
        name=row.name,
        format=row.format,
        retired=bool(row.retired),
    )


class SqlPersonService:
    """
    Person lookups backed by SQLAlchemy. Database failures are logged and
    reported as an absent result.
    """

    def __init__(self, session_factory):
        self.session_factory = session_factory

    def get_person_attribute_type_by_uuid(self, uuid):
        session = self.session_factory()
        try:
            row = (
                session.query(PersonAttributeTypeRecord)
                .filter(PersonAttributeTypeRecord.uuid == uuid)
                .one_or_none()
            )
            return _to_attribute_type(row) if row is not None else None
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to fetch person attribute type {uuid}: {e}")
            return None
        finally:
            session.close()

    def get_person(self, person_id):
        """
        Loads a person with its attributes, or None if unknown or voided.
        """
        session = self.session_factory()
        try:
            row = session.get(PersonRecord, person_id)
            if row is None or row.voided:
                return None
            attributes = [
                PersonAttribute(
                    attribute_type=_to_attribute_type(a.attribute_type),
                    value=a.value,
                    voided=bool(a.voided),
                )
                for a in row.attributes
            ]
            return Person(person_id=row.id, attributes=attributes)
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to fetch person {person_id}: {e}")
            return None
        finally:
            session.close()

    def save_person_attribute_type(self, uuid, name, format=None):
        """
        Stores a new attribute type and returns its id.
        """
        session = self.session_factory()
        try:
            row = PersonAttributeTypeRecord(uuid=uuid, name=name, format=format)
            session.add(row)
            session.commit()
            logger.info(f"✅ Person attribute type saved: {name} ({uuid})")
            return row.id
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"❌ Failed to save person attribute type {uuid}: {e}")
            return None
        finally:
            session.close()

    def save_person(self, attributes=None):
        """
        Stores a person with {attribute_type_uuid: value} attributes and returns
        the new person id. Unknown attribute type uuids are skipped.
        """
        session = self.session_factory()
        try:
            person = PersonRecord()
            session.add(person)
            for uuid, value in (attributes or {}).items():
                attr_type = (
                    session.query(PersonAttributeTypeRecord)
                    .filter(PersonAttributeTypeRecord.uuid == uuid)
                    .one_or_none()
                )
                if attr_type is None:
                    logger.warning(f"⚠️ Skipping attribute with unknown type uuid: {uuid}")
                    continue
                person.attributes.append(
                    PersonAttributeRecord(attribute_type=attr_type, value=value)
                )
            session.commit()
            logger.info(f"✅ Person saved with ID: {person.id}")
            return person.id
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"❌ Failed to save person: {e}")
            return None
        finally:
            session.close()
