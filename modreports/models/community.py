from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey, TIMESTAMP, func
from modreports.database import Base


class Community(Base):
    __tablename__ = "community"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    removed = Column(Boolean, default=False, nullable=False)
    deleted = Column(Boolean, default=False, nullable=False)
    hidden = Column(Boolean, default=False, nullable=False)
    published = Column(TIMESTAMP, server_default=func.now(), nullable=False)


class CommunityActions(Base):
    """Per (person, community) edge: follow state, moderator grant and ban."""

    __tablename__ = "community_actions"

    person_id = Column(Integer, ForeignKey("person.id", ondelete="CASCADE"), primary_key=True)
    community_id = Column(Integer, ForeignKey("community.id", ondelete="CASCADE"), primary_key=True, index=True)
    followed = Column(TIMESTAMP, nullable=True)
    follow_pending = Column(Boolean, nullable=True)
    became_moderator = Column(TIMESTAMP, nullable=True)
    received_ban = Column(TIMESTAMP, nullable=True)
    ban_expires = Column(TIMESTAMP, nullable=True)
