# modreports/crud/viewer_context.py
"""
Viewer-relative join helpers.

Every action table is keyed on (person, target). These helpers return the
ON clause for a left join against such a table, plus the expressions that
turn a possibly missing edge into a plain boolean or scalar. A missing
row always reads as False / None, never as an error.
"""

from sqlalchemy import and_, case, func, literal

from modreports.schemas.post_report import SubscribedType


def community_actions_on(actions, person_id, community_id):
    """ON clause joining a (possibly aliased) community_actions table."""
    return and_(
        actions.person_id == person_id,
        actions.community_id == community_id,
    )


def post_actions_on(actions, person_id, post_id):
    return and_(
        actions.person_id == person_id,
        actions.post_id == post_id,
    )


def person_actions_on(actions, person_id, target_id):
    return and_(
        actions.person_id == person_id,
        actions.target_id == target_id,
    )


def is_set(column):
    """True when a left-joined action timestamp exists."""
    return column.is_not(None)


def subscribed_type(actions):
    """Tri-state subscription of a person to a community."""
    return case(
        (actions.followed.is_(None), literal(SubscribedType.NOT_SUBSCRIBED.value)),
        (actions.follow_pending.is_(True), literal(SubscribedType.PENDING.value)),
        else_=literal(SubscribedType.SUBSCRIBED.value),
    )


def unread_comments(aggregates, actions):
    """
    Comments the viewer has not seen yet.

    Falls back to the raw total when the viewer never opened the post; a
    post with no aggregates row counts as zero.
    """
    return func.coalesce(
        aggregates.comments - actions.read_comments_amount,
        aggregates.comments,
        0,
    )
