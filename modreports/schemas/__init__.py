# modreports/schemas/__init__.py

from .post_report import (
    SubscribedType,
    PersonSchema,
    CommunitySchema,
    PostSchema,
    PostAggregatesSchema,
    PostReportSchema,
    PostReportView,
    PostReportQuery,
)

__all__ = [
    "SubscribedType",
    "PersonSchema",
    "CommunitySchema",
    "PostSchema",
    "PostAggregatesSchema",
    "PostReportSchema",
    "PostReportView",
    "PostReportQuery",
]
