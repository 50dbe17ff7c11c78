from . import viewer_context, post_report, post_report_view

__all__ = ["post_report", "post_report_view", "viewer_context"]
