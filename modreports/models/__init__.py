# modreports/models/__init__.py
# Import models in dependency order
from .person import Person, LocalUser, PersonActions
from .community import Community, CommunityActions
from .post import Post, PostAggregates, PostActions
from .post_report import PostReport  # Import PostReport LAST

__all__ = [
    "Person",
    "LocalUser",
    "PersonActions",
    "Community",
    "CommunityActions",
    "Post",
    "PostAggregates",
    "PostActions",
    "PostReport",
]
