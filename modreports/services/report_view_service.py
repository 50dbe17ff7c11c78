# modreports/services/report_view_service.py
"""
Report View Service Layer
Point lookup, moderation queue listing and open-report counts.

Listings and counts are scoped by the visibility policy: site admins see
every report, everyone else only reports in communities they moderate.
Point lookups are not scoped; callers authorise access first.
"""

import logging
from typing import List, Optional

from sqlalchemy import and_, func
from sqlalchemy.orm import Session

from modreports.crud.post_report_view import moderated_by_viewer, post_report_view_query, to_view
from modreports.database import store_errors
from modreports.errors import ReportNotFound
from modreports.models import CommunityActions, Person, Post, PostReport
from modreports.schemas.post_report import PostReportQuery, PostReportView
from modreports.utils.pagination import limit_and_offset

logger = logging.getLogger(__name__)


# ======================
# POINT LOOKUP
# ======================

def read_post_report_view(db: Session, report_id: int, my_person_id: int) -> PostReportView:
    """
    Get one report view as seen by ``my_person_id``.

    Raises:
        ReportNotFound: If no report has this ID
    """
    with store_errors(db):
        row = (
            post_report_view_query(db, my_person_id)
            .filter(PostReport.id == report_id)
            .first()
        )

    if row is None:
        raise ReportNotFound(report_id)
    return to_view(row)


# ======================
# LISTING
# ======================

def list_post_reports(
    db: Session,
    query: PostReportQuery,
    *,
    my_person_id: int,
    admin: bool,
) -> List[PostReportView]:
    """
    List report views for the moderation queue.

    With ``unresolved_only`` the open reports come back oldest first so the
    queue drains in arrival order; otherwise every report is returned
    newest first.

    Args:
        db: Database session
        query: Filters and paging
        my_person_id: Viewer
        admin: Whether the viewer is a site admin

    Returns:
        Ordered list of PostReportView, possibly empty

    Raises:
        InvalidPagination: If page or limit are out of range
    """
    limit, offset = limit_and_offset(query.page, query.limit)

    q = post_report_view_query(db, my_person_id)

    if query.community_id is not None:
        q = q.filter(Post.community_id == query.community_id)

    if query.post_id is not None:
        q = q.filter(Post.id == query.post_id)

    if query.unresolved_only:
        q = q.filter(PostReport.resolved.is_(False)).order_by(
            PostReport.published.asc(), PostReport.id.asc()
        )
    else:
        q = q.order_by(PostReport.published.desc(), PostReport.id.desc())

    if not admin:
        q = q.filter(moderated_by_viewer())

    with store_errors(db):
        rows = q.limit(limit).offset(offset).all()

    logger.debug(
        "Listed %s post report(s) for person %s (admin=%s, community_id=%s, post_id=%s, unresolved_only=%s)",
        len(rows),
        my_person_id,
        admin,
        query.community_id,
        query.post_id,
        query.unresolved_only,
    )
    return [to_view(row) for row in rows]


# ======================
# COUNTS
# ======================

def get_report_count(
    db: Session,
    *,
    my_person_id: int,
    admin: bool,
    community_id: Optional[int] = None,
) -> int:
    """
    Count unresolved reports visible to the viewer.

    Uses the same scoping as list_post_reports(unresolved_only=True).
    """
    q = (
        db.query(func.count(PostReport.id))
        .select_from(PostReport)
        .outerjoin(Post, PostReport.post_id == Post.id)
        .join(Person, PostReport.creator_id == Person.id)
        .filter(PostReport.resolved.is_(False))
    )

    if community_id is not None:
        q = q.filter(Post.community_id == community_id)

    if not admin:
        q = q.join(
            CommunityActions,
            and_(
                CommunityActions.community_id == Post.community_id,
                CommunityActions.person_id == my_person_id,
                CommunityActions.became_moderator.is_not(None),
            ),
        )

    with store_errors(db):
        count = q.scalar()

    logger.debug(
        "Open post report count for person %s (admin=%s, community_id=%s): %s",
        my_person_id,
        admin,
        community_id,
        count,
    )
    return int(count or 0)
