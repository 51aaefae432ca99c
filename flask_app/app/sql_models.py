# sql_models.py - Database Models for person records used by registration

import os

from dotenv import load_dotenv
from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, create_engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker

# ✅ Load environment variables (database connection)
load_dotenv()
DEFAULT_DATABASE_URL = "sqlite:///registration.db"

Base = declarative_base()


class PersonRecord(Base):
    """
    Database model for a person.
    """
    __tablename__ = "person"

    id = Column(Integer, primary_key=True, autoincrement=True)
    voided = Column(Boolean, default=False)


class PersonAttributeTypeRecord(Base):
    """
    Database model for person attribute types, looked up by uuid.
    """
    __tablename__ = "person_attribute_type"

    id = Column(Integer, primary_key=True, autoincrement=True)
    uuid = Column(String(38), nullable=False, unique=True, index=True)
    name = Column(String, nullable=False)
    format = Column(String, nullable=True)
    retired = Column(Boolean, default=False)


class PersonAttributeRecord(Base):
    """
    Database model for a single (type, value) attribute of a person.
    """
    __tablename__ = "person_attribute"

    id = Column(Integer, primary_key=True, autoincrement=True)
    person_id = Column(Integer, ForeignKey("person.id"), nullable=False, index=True)
    attribute_type_id = Column(Integer, ForeignKey("person_attribute_type.id"), nullable=False)
    value = Column(String, nullable=False)
    voided = Column(Boolean, default=False)

    person = relationship("PersonRecord", back_populates="attributes")
    attribute_type = relationship("PersonAttributeTypeRecord")


# ✅ Define Relationship Between Persons & Attributes
PersonRecord.attributes = relationship(
    "PersonAttributeRecord", order_by=PersonAttributeRecord.id, back_populates="person"
)


def make_engine(database_url: str | None = None):
    """
    Create the engine for database_url (or DATABASE_URL from the environment)
    and make sure tables exist. The caller owns the engine and disposes it.
    """
    url = database_url or os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL
    engine = create_engine(url)
    Base.metadata.create_all(engine)
    return engine


def make_session_factory(engine):
    return sessionmaker(autoflush=False, bind=engine)
