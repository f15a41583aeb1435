"""Analysis module"""
from .prioritizer import KeyPointPrioritizer, priority_for

__all__ = [
    "KeyPointPrioritizer",
    "priority_for",
]
