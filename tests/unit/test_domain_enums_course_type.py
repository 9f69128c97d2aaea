"""Unit tests for the CourseType coded enum."""

import pytest

from src.domain.coded_enums import get_coded_enum_type_by_name
from src.domain.enums import CourseType


@pytest.mark.unit
class TestCourseType:
    """Test CourseType declaration and registry entry."""

    def test_codes(self):
        assert CourseType.PICTURE.code == 102
        assert CourseType.AUDIO.code == 103
        assert CourseType.VIDEO.code == 104
        assert CourseType.URL.code == 105

    def test_labels_match_member_names(self):
        assert [member.label for member in CourseType] == [
            "PICTURE",
            "AUDIO",
            "VIDEO",
            "URL",
        ]

    def test_describe(self):
        assert CourseType.describe() == "102:PICTURE; 103:AUDIO; 104:VIDEO; 105:URL"

    def test_allowed_codes(self):
        assert CourseType.allowed_codes() == ["102", "103", "104", "105"]

    def test_registered_under_class_name(self):
        assert get_coded_enum_type_by_name("CourseType") is CourseType.coded_type()

    def test_from_code(self):
        assert CourseType.from_code(103).value is CourseType.AUDIO
