from sqlalchemy import Column, Integer, SmallInteger, String, Text, Boolean, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship
from modreports.database import Base


# ---------------- POST ----------------
class Post(Base):
    __tablename__ = "post"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    url = Column(String(2000), nullable=True)
    body = Column(Text, nullable=True)
    creator_id = Column(Integer, ForeignKey("person.id", ondelete="CASCADE"), nullable=False, index=True)
    community_id = Column(Integer, ForeignKey("community.id", ondelete="CASCADE"), nullable=False, index=True)
    removed = Column(Boolean, default=False, nullable=False)
    locked = Column(Boolean, default=False, nullable=False)
    deleted = Column(Boolean, default=False, nullable=False)
    nsfw = Column(Boolean, default=False, nullable=False)
    published = Column(TIMESTAMP, server_default=func.now(), nullable=False)
    updated = Column(TIMESTAMP, nullable=True)

    aggregates = relationship("PostAggregates", uselist=False, cascade="all, delete-orphan")


# ---------------- POST AGGREGATES ----------------
class PostAggregates(Base):
    __tablename__ = "post_aggregates"

    post_id = Column(Integer, ForeignKey("post.id", ondelete="CASCADE"), primary_key=True)
    comments = Column(Integer, default=0, nullable=False)
    score = Column(Integer, default=0, nullable=False)
    upvotes = Column(Integer, default=0, nullable=False)
    downvotes = Column(Integer, default=0, nullable=False)
    published = Column(TIMESTAMP, server_default=func.now(), nullable=False)
    newest_comment_time = Column(TIMESTAMP, server_default=func.now(), nullable=False)


# ---------------- POST ACTIONS ----------------
class PostActions(Base):
    """Per (person, post) edge. Every flag is a timestamp, null when unset."""

    __tablename__ = "post_actions"

    person_id = Column(Integer, ForeignKey("person.id", ondelete="CASCADE"), primary_key=True)
    post_id = Column(Integer, ForeignKey("post.id", ondelete="CASCADE"), primary_key=True, index=True)
    read = Column(TIMESTAMP, nullable=True)
    read_comments = Column(TIMESTAMP, nullable=True)
    read_comments_amount = Column(Integer, nullable=True)
    saved = Column(TIMESTAMP, nullable=True)
    liked = Column(TIMESTAMP, nullable=True)
    like_score = Column(SmallInteger, nullable=True)
    hidden = Column(TIMESTAMP, nullable=True)
