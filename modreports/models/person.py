from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship
from modreports.database import Base


# ---------------- PERSON ----------------
class Person(Base):
    __tablename__ = "person"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    display_name = Column(String(255), nullable=True)
    banned = Column(Boolean, default=False, nullable=False)
    deleted = Column(Boolean, default=False, nullable=False)
    local = Column(Boolean, default=True, nullable=False)
    published = Column(TIMESTAMP, server_default=func.now(), nullable=False)

    local_user = relationship("LocalUser", back_populates="person", uselist=False, cascade="all, delete-orphan")


# ---------------- LOCAL USER ----------------
class LocalUser(Base):
    __tablename__ = "local_user"

    id = Column(Integer, primary_key=True, index=True)
    person_id = Column(Integer, ForeignKey("person.id", ondelete="CASCADE"), unique=True, nullable=False)
    admin = Column(Boolean, default=False, nullable=False)

    person = relationship("Person", back_populates="local_user")


# ---------------- PERSON ACTIONS ----------------
class PersonActions(Base):
    """Edges from one person to another (follow, block)."""

    __tablename__ = "person_actions"

    person_id = Column(Integer, ForeignKey("person.id", ondelete="CASCADE"), primary_key=True)
    target_id = Column(Integer, ForeignKey("person.id", ondelete="CASCADE"), primary_key=True)
    followed = Column(TIMESTAMP, nullable=True)
    blocked = Column(TIMESTAMP, nullable=True)
