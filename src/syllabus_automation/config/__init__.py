"""
Configuration module.

Handles loading, validation and normalization of per-course syllabus
configurations.
"""

from .loader import ConfigLoader, LoadResult, load_course_config
from .models import (
    CourseConfig,
    CourseDescription,
    CourseInfo,
    InstructorInfo,
    MeetingInfo,
    Textbook,
)

__all__ = [
    "ConfigLoader",
    "LoadResult",
    "load_course_config",
    "CourseConfig",
    "CourseDescription",
    "CourseInfo",
    "InstructorInfo",
    "MeetingInfo",
    "Textbook",
]
