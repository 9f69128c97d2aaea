"""Domain enums for business logic.

Coded enums live here and register themselves in the coded enum registry
on import, so importing this package is the registry's initialization step.

Available Enums:
    - CourseType: Course media type (102-105)
"""

from src.domain.enums.course_type import CourseType

__all__ = [
    "CourseType",
]
