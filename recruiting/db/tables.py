"""
Relational schema - SQLAlchemy ORM entities.

Tables:
- consultant : personal details, one row per consultant
- address    : residence / domicile, each owned by exactly one consultant
- experience : jobs, many per consultant
- education  : schools, many per consultant
- language   : composite key (language, consultant_id)
- skill      : composite key (skill, consultant_id)
- role, user : administration

Child rows are deleted with their consultant (delete-orphan cascade).
"""
from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class Consultant(Base):
    __tablename__ = "consultant"

    id = Column(Integer, primary_key=True, autoincrement=True)
    consultant_no = Column(String(32), unique=True, nullable=False)
    registration_date = Column(DateTime, nullable=False, index=True)
    fiscal_code = Column(String(16), unique=True)
    email = Column(String(128))
    first_name = Column(String(64))
    last_name = Column(String(64))
    gender = Column(String(8))
    phone_number = Column(String(32))
    mobile_number = Column(String(32))
    birth_date = Column(Date)
    birth_city = Column(String(64))
    birth_country = Column(String(64))
    nationality = Column(String(64))
    identity_card_no = Column(String(32))
    passport_no = Column(String(32))
    marital_status = Column(String(16))
    interests = Column(Text)

    residence = relationship(
        "Address",
        foreign_keys="Address.consultant_residence_id",
        uselist=False,
        cascade="all, delete-orphan",
    )
    domicile = relationship(
        "Address",
        foreign_keys="Address.consultant_domicile_id",
        uselist=False,
        cascade="all, delete-orphan",
    )
    experiences = relationship(
        "Experience", back_populates="consultant", cascade="all, delete-orphan", order_by="Experience.id"
    )
    educations = relationship(
        "Education", back_populates="consultant", cascade="all, delete-orphan", order_by="Education.id"
    )
    languages = relationship("Language", back_populates="consultant", cascade="all, delete-orphan")
    skills = relationship("Skill", back_populates="consultant", cascade="all, delete-orphan")


class Address(Base):
    __tablename__ = "address"

    id = Column(Integer, primary_key=True, autoincrement=True)
    street = Column(String(128))
    house_no = Column(String(16))
    zip_code = Column(String(16))
    city = Column(String(64))
    province = Column(String(64))
    region = Column(String(64))
    country = Column(String(64))
    # exactly one of the two is set
    consultant_residence_id = Column(Integer, ForeignKey("consultant.id", ondelete="CASCADE"), unique=True)
    consultant_domicile_id = Column(Integer, ForeignKey("consultant.id", ondelete="CASCADE"), unique=True)


class Experience(Base):
    __tablename__ = "experience"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_name = Column(String(128))
    job_position = Column(String(128))
    location = Column(String(128))
    period_from = Column(Date)
    period_to = Column(Date)
    current = Column(Boolean, nullable=False, default=False)
    description = Column(Text)
    consultant_id = Column(Integer, ForeignKey("consultant.id", ondelete="CASCADE"), nullable=False, index=True)

    consultant = relationship("Consultant", back_populates="experiences")


class Education(Base):
    __tablename__ = "education"

    id = Column(Integer, primary_key=True, autoincrement=True)
    school_name = Column(String(128))
    start_year = Column(Integer)
    end_year = Column(Integer)
    current = Column(Boolean, nullable=False, default=False)
    school_degree = Column(String(128))
    fields_of_study = Column(String(256))
    grade = Column(String(32))
    activities = Column(Text)
    description = Column(Text)
    consultant_id = Column(Integer, ForeignKey("consultant.id", ondelete="CASCADE"), nullable=False, index=True)

    consultant = relationship("Consultant", back_populates="educations")


class Language(Base):
    __tablename__ = "language"

    language = Column(String(64), primary_key=True)
    consultant_id = Column(Integer, ForeignKey("consultant.id", ondelete="CASCADE"), primary_key=True)
    proficiency = Column(String(32))

    consultant = relationship("Consultant", back_populates="languages")


class Skill(Base):
    __tablename__ = "skill"

    skill = Column(String(64), primary_key=True)
    consultant_id = Column(Integer, ForeignKey("consultant.id", ondelete="CASCADE"), primary_key=True)

    consultant = relationship("Consultant", back_populates="skills")


class Role(Base):
    __tablename__ = "role"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), unique=True, nullable=False)


class User(Base):
    __tablename__ = "user"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(64), unique=True, nullable=False)
    password = Column(String(128), nullable=False)
    first_name = Column(String(64))
    last_name = Column(String(64))
    email = Column(String(128))
    not_removable = Column(Boolean, nullable=False, default=False)
    role_id = Column(Integer, ForeignKey("role.id"))

    role = relationship("Role", lazy="joined")
