# modreports/schemas/post_report.py
"""
Post Report Pydantic Schemas
Read models for the moderation report views and the listing filter value.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SubscribedType(str, Enum):
    SUBSCRIBED = "Subscribed"
    NOT_SUBSCRIBED = "NotSubscribed"
    PENDING = "Pending"


# ======================
# ENTITY SNAPSHOTS
# ======================

class PersonSchema(BaseModel):
    id: int
    name: str
    display_name: Optional[str] = None
    banned: bool = False
    deleted: bool = False
    local: bool = True
    published: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CommunitySchema(BaseModel):
    id: int
    name: str
    title: str
    description: Optional[str] = None
    removed: bool = False
    deleted: bool = False
    hidden: bool = False
    published: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PostSchema(BaseModel):
    id: int
    name: str
    url: Optional[str] = None
    body: Optional[str] = None
    creator_id: int
    community_id: int
    removed: bool = False
    locked: bool = False
    deleted: bool = False
    nsfw: bool = False
    published: Optional[datetime] = None
    updated: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PostAggregatesSchema(BaseModel):
    post_id: int
    comments: int = 0
    score: int = 0
    upvotes: int = 0
    downvotes: int = 0
    published: Optional[datetime] = None
    newest_comment_time: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PostReportSchema(BaseModel):
    id: int
    creator_id: int
    post_id: int
    original_post_name: str
    original_post_url: Optional[str] = None
    original_post_body: Optional[str] = None
    reason: str
    resolved: bool = False
    resolver_id: Optional[int] = None
    published: Optional[datetime] = None
    updated: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# ======================
# REPORT VIEW
# ======================

class PostReportView(BaseModel):
    """One post report joined with everything a moderator needs to act on it.

    Flags prefixed ``creator_`` describe the post author's standing in the
    community. ``subscribed``, ``saved``, ``read``, ``hidden``,
    ``creator_blocked`` and ``my_vote`` are relative to the viewer the view
    was built for.
    """

    post_report: PostReportSchema
    post: Optional[PostSchema] = None
    community: Optional[CommunitySchema] = None
    creator: PersonSchema
    post_creator: Optional[PersonSchema] = None
    creator_banned_from_community: bool = False
    creator_is_moderator: bool = False
    creator_is_admin: bool = False
    subscribed: SubscribedType = SubscribedType.NOT_SUBSCRIBED
    saved: bool = False
    read: bool = False
    hidden: bool = False
    creator_blocked: bool = False
    my_vote: Optional[int] = None
    unread_comments: int = 0
    counts: Optional[PostAggregatesSchema] = None
    resolver: Optional[PersonSchema] = None


# ======================
# LISTING FILTERS
# ======================

class PostReportQuery(BaseModel):
    """Filters for listing post reports.

    ``unresolved_only`` also picks the ordering: oldest first for the
    unresolved queue, newest first for the full history.
    """

    community_id: Optional[int] = Field(None, description="Only reports on posts in this community")
    post_id: Optional[int] = Field(None, description="Only reports on this post")
    page: Optional[int] = Field(None, description="1-based page number")
    limit: Optional[int] = Field(None, description="Page size")
    unresolved_only: bool = Field(False, description="Only unresolved reports, oldest first")

    model_config = ConfigDict(frozen=True)
