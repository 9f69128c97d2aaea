"""Course type classification.

Identifies the media format of a course. The integer codes are part of the
public API contract: clients send and receive the bare code (e.g. `103`),
never the member name.

Codes:
    102: Picture and text lesson
    103: Audio lesson
    104: Video lesson
    105: Link to external content

Usage:
    from src.domain.enums import CourseType

    CourseType.describe()
    # '102:PICTURE; 103:AUDIO; 104:VIDEO; 105:URL'
"""

from src.domain.coded_enums import CodedEnum, coded_enum


@coded_enum
class CourseType(CodedEnum):
    """Course media type with integer wire codes.

    Example:
        >>> CourseType.VIDEO.code
        104
        >>> CourseType.VIDEO.label
        'VIDEO'
    """

    PICTURE = 102, "PICTURE"
    """Illustrated text lesson."""

    AUDIO = 103, "AUDIO"
    """Audio-only lesson."""

    VIDEO = 104, "VIDEO"
    """Video lesson."""

    URL = 105, "URL"
    """Lesson hosted elsewhere, delivered as a link."""
