from hypothesis import given, strategies as st

from stitchclass.cli import parse_region
from stitchclass.config import Settings
from stitchclass.regions import Interval


class TestSettings:
    def test_default_values(self):
        """Test that Settings has sensible defaults."""
        settings = Settings()
        assert settings.ignore_overlap is False
        assert settings.axis_separator == ","
        assert settings.bound_separator == ":"
        assert settings.label_separator == "+"

    def test_custom_separators_drive_parsing(self):
        settings = Settings(axis_separator=";", bound_separator="..", label_separator="/")
        region = parse_region("1/2=0..10;5..15", settings)

        assert region.size() == 2
        assert region.get(1) == Interval(5.0, 15.0)
        assert region.classes == {1, 2}

    @given(flag=st.booleans())
    def test_ignore_overlap_is_stored(self, flag):
        assert Settings(ignore_overlap=flag).ignore_overlap is flag
