import pytest
from sqlalchemy.orm import aliased

from modreports.crud.viewer_context import subscribed_type, unread_comments
from modreports.models import CommunityActions, PostActions, PostAggregates


def test_expressions_only_reference_the_given_alias():
    viewer_actions = aliased(CommunityActions, name="viewer_community_actions")
    viewer_post_actions = aliased(PostActions, name="viewer_post_actions")

    subscribed_sql = str(subscribed_type(viewer_actions))
    unread_sql = str(unread_comments(PostAggregates, viewer_post_actions))

    assert "viewer_community_actions.followed" in subscribed_sql
    assert "community_actions.followed" not in subscribed_sql.replace("viewer_community_actions", "")
    assert "viewer_post_actions.read_comments_amount" in unread_sql
    assert "post_actions.read_comments_amount" not in unread_sql.replace("viewer_post_actions", "")


def test_action_table_must_be_passed_explicitly():
    with pytest.raises(TypeError):
        subscribed_type()
    with pytest.raises(TypeError):
        unread_comments(PostAggregates)
