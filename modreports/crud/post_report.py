# modreports/crud/post_report.py
"""
Post Report Store
Resolution workflow over persisted post reports. Filing reports happens
elsewhere; the unique (post_id, creator_id) constraint guards it.
"""

import logging
from datetime import datetime, UTC
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from modreports.database import store_errors
from modreports.models.post_report import PostReport

logger = logging.getLogger(__name__)


def get_post_report(db: Session, report_id: int) -> Optional[PostReport]:
    """
    Get a post report by its ID.

    Args:
        db: Database session
        report_id: Report identifier

    Returns:
        PostReport object or None if not found
    """
    with store_errors(db):
        return db.query(PostReport).filter(PostReport.id == report_id).first()


def _update_reports(db: Session, query, values: dict) -> int:
    with store_errors(db):
        try:
            updated = query.update(values, synchronize_session=False)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
    return int(updated)


def resolve(db: Session, report_id: int, resolver_id: int) -> int:
    """
    Mark a single report resolved by ``resolver_id``.

    Returns:
        Number of rows updated (0 when the report does not exist)
    """
    updated = _update_reports(
        db,
        db.query(PostReport).filter(PostReport.id == report_id),
        {"resolved": True, "resolver_id": resolver_id, "updated": datetime.now(UTC)},
    )
    logger.info("Post report %s resolved by person %s (rows=%s)", report_id, resolver_id, updated)
    return updated


def unresolve(db: Session, report_id: int) -> int:
    """
    Reopen a single report, clearing its resolver.

    Returns:
        Number of rows updated (0 when the report does not exist)
    """
    updated = _update_reports(
        db,
        db.query(PostReport).filter(PostReport.id == report_id),
        {"resolved": False, "resolver_id": None, "updated": datetime.now(UTC)},
    )
    logger.info("Post report %s reopened (rows=%s)", report_id, updated)
    return updated


def resolve_all_for_object(db: Session, post_id: int, resolver_id: int) -> int:
    """
    Resolve every open report on a post in one statement.

    Only currently unresolved rows are touched, so calling this again (or
    racing another caller) updates nothing and is not an error.

    Args:
        db: Database session
        post_id: Reported post
        resolver_id: Person closing the reports

    Returns:
        Number of reports that changed state
    """
    updated = _update_reports(
        db,
        db.query(PostReport).filter(
            PostReport.post_id == post_id,
            PostReport.resolved.is_(False),
        ),
        {"resolved": True, "resolver_id": resolver_id, "updated": datetime.now(UTC)},
    )
    logger.info(
        "Resolved %s open report(s) on post %s by person %s",
        updated,
        post_id,
        resolver_id,
    )
    return updated
