from .pagination import limit_and_offset

__all__ = ["limit_and_offset"]
