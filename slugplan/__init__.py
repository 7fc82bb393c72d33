"""
SlugPlan: course catalog text -> structured course records.

Public API:
- get_subject_map(path) -> SubjectMap
- get_subject_map_from_text(text, source) -> SubjectMap
"""

from slugplan.parse import get_subject_map, get_subject_map_from_text

__all__ = ["get_subject_map", "get_subject_map_from_text"]
