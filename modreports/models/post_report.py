from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey, TIMESTAMP, UniqueConstraint, func
from sqlalchemy.orm import relationship

from modreports.database import Base


class PostReport(Base):
    __tablename__ = "post_report"
    __table_args__ = (
        UniqueConstraint("post_id", "creator_id", name="uq_post_report_post_creator"),
    )

    id = Column(Integer, primary_key=True, index=True)
    creator_id = Column(Integer, ForeignKey("person.id", ondelete="CASCADE"), nullable=False, index=True)
    post_id = Column(Integer, ForeignKey("post.id", ondelete="CASCADE"), nullable=False, index=True)
    # Snapshot of the post at report time
    original_post_name = Column(String(200), nullable=False)
    original_post_url = Column(Text, nullable=True)
    original_post_body = Column(Text, nullable=True)
    reason = Column(Text, nullable=False)
    resolved = Column(Boolean, default=False, nullable=False, index=True)
    resolver_id = Column(Integer, ForeignKey("person.id", ondelete="CASCADE"), nullable=True)
    published = Column(TIMESTAMP, server_default=func.now(), nullable=False, index=True)
    updated = Column(TIMESTAMP, nullable=True)

    creator = relationship("Person", foreign_keys=[creator_id])
    resolver = relationship("Person", foreign_keys=[resolver_id])
