"""Moderation report views: storage, viewer-relative projection and queues."""
