# modreports/crud/post_report_view.py
"""
Post Report View Assembler
Builds the one join graph shared by point lookups and listings, and turns
its result rows into PostReportView objects.
"""

from sqlalchemy import and_
from sqlalchemy.orm import Query, Session, aliased

from modreports.crud.viewer_context import (
    community_actions_on,
    is_set,
    person_actions_on,
    post_actions_on,
    subscribed_type,
    unread_comments,
)
from modreports.models import (
    Community,
    CommunityActions,
    LocalUser,
    Person,
    PersonActions,
    Post,
    PostActions,
    PostAggregates,
    PostReport,
)
from modreports.schemas.post_report import (
    CommunitySchema,
    PersonSchema,
    PostAggregatesSchema,
    PostReportSchema,
    PostReportView,
    PostSchema,
    SubscribedType,
)


# Person is joined three times: report creator, post author and resolver.
PostCreator = aliased(Person, name="post_creator")
Resolver = aliased(Person, name="resolver")

# The post author's standing in the community, independent of the viewer.
CreatorCommunityActions = aliased(CommunityActions, name="creator_community_actions")

# The viewer's own edges.
ViewerCommunityActions = aliased(CommunityActions, name="viewer_community_actions")
ViewerPostActions = aliased(PostActions, name="viewer_post_actions")
ViewerPersonActions = aliased(PersonActions, name="viewer_person_actions")

AdminLocalUser = aliased(LocalUser, name="creator_local_user")


def post_report_view_query(db: Session, my_person_id: int) -> Query:
    """
    Build the un-executed report view query for one viewer.

    The post, its aggregates, its community and its author are outer
    joined so a report always yields exactly one row. Callers add their
    own filters, ordering and paging before executing it.

    Args:
        db: Database session
        my_person_id: Viewer the relationship flags are computed for

    Returns:
        SQLAlchemy Query whose rows are accepted by to_view()
    """
    return (
        db.query(
            PostReport,
            Post,
            Community,
            Person,
            PostCreator,
            is_set(CreatorCommunityActions.received_ban).label("creator_banned_from_community"),
            is_set(CreatorCommunityActions.became_moderator).label("creator_is_moderator"),
            is_set(AdminLocalUser.admin).label("creator_is_admin"),
            subscribed_type(ViewerCommunityActions).label("subscribed"),
            is_set(ViewerPostActions.saved).label("saved"),
            is_set(ViewerPostActions.read).label("read"),
            is_set(ViewerPostActions.hidden).label("hidden"),
            is_set(ViewerPersonActions.blocked).label("creator_blocked"),
            ViewerPostActions.like_score.label("my_vote"),
            unread_comments(PostAggregates, ViewerPostActions).label("unread_comments"),
            PostAggregates,
            Resolver,
        )
        .select_from(PostReport)
        .outerjoin(Post, PostReport.post_id == Post.id)
        .outerjoin(Community, Post.community_id == Community.id)
        .join(Person, PostReport.creator_id == Person.id)
        .outerjoin(PostCreator, Post.creator_id == PostCreator.id)
        .outerjoin(
            CreatorCommunityActions,
            community_actions_on(CreatorCommunityActions, Post.creator_id, Post.community_id),
        )
        .outerjoin(
            ViewerCommunityActions,
            community_actions_on(ViewerCommunityActions, my_person_id, Post.community_id),
        )
        .outerjoin(
            AdminLocalUser,
            and_(
                AdminLocalUser.person_id == Post.creator_id,
                AdminLocalUser.admin.is_(True),
            ),
        )
        .outerjoin(
            ViewerPostActions,
            post_actions_on(ViewerPostActions, my_person_id, PostReport.post_id),
        )
        .outerjoin(
            ViewerPersonActions,
            person_actions_on(ViewerPersonActions, my_person_id, Post.creator_id),
        )
        .outerjoin(PostAggregates, PostAggregates.post_id == PostReport.post_id)
        .outerjoin(Resolver, PostReport.resolver_id == Resolver.id)
    )


def moderated_by_viewer():
    """Filter keeping reports whose community the viewer moderates."""
    return ViewerCommunityActions.became_moderator.is_not(None)


def _snapshot(schema, obj):
    if obj is None:
        return None
    return schema.model_validate(obj)


def to_view(row) -> PostReportView:
    (
        report,
        post,
        community,
        creator,
        post_creator,
        creator_banned_from_community,
        creator_is_moderator,
        creator_is_admin,
        subscribed,
        saved,
        read,
        hidden,
        creator_blocked,
        my_vote,
        unread,
        counts,
        resolver,
    ) = row

    return PostReportView(
        post_report=PostReportSchema.model_validate(report),
        post=_snapshot(PostSchema, post),
        community=_snapshot(CommunitySchema, community),
        creator=PersonSchema.model_validate(creator),
        post_creator=_snapshot(PersonSchema, post_creator),
        creator_banned_from_community=bool(creator_banned_from_community),
        creator_is_moderator=bool(creator_is_moderator),
        creator_is_admin=bool(creator_is_admin),
        subscribed=SubscribedType(subscribed),
        saved=bool(saved),
        read=bool(read),
        hidden=bool(hidden),
        creator_blocked=bool(creator_blocked),
        my_vote=my_vote,
        unread_comments=int(unread),
        counts=_snapshot(PostAggregatesSchema, counts),
        resolver=_snapshot(PersonSchema, resolver),
    )
