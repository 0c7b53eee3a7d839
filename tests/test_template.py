"""Tests for template composition."""

import pytest

from format_timestamp.exceptions import TemplateError
from format_timestamp.formatters import (
    am_pm,
    day2,
    hours2,
    hours122,
    minutes2,
    month2,
    seconds2,
    short_year,
    year4,
)
from format_timestamp.schema.types import Timestamp, timestamp
from format_timestamp.template import (
    TimestampTemplate,
    compile_template,
    parse_pattern,
    timestamp_template,
)


class TestTimestampTemplate:
    """Tests for timestamp_template function."""

    def test_interleaves_texts_and_formatters(self, sample_timestamp):
        """Output should alternate text segments and formatter output."""
        fmt = timestamp_template(
            ["", ":", ":", " ", "/", "/", ""],
            [hours2, minutes2, seconds2, day2, month2, short_year]
        )
        assert fmt(sample_timestamp) == "11:58:27.239 01/05/21"

    def test_leading_and_trailing_text(self, sample_timestamp):
        """Text before the first and after the last placeholder should be kept."""
        fmt = timestamp_template(["at ", " o'clock"], [hours2])
        assert fmt(sample_timestamp) == "at 11 o'clock"

    def test_no_placeholders(self, sample_timestamp):
        """A single text segment should render as itself."""
        fmt = timestamp_template(["constant"], [])
        assert fmt(sample_timestamp) == "constant"

    def test_adjacent_placeholders(self, sample_timestamp):
        """Empty separators should concatenate formatter output directly."""
        fmt = timestamp_template(["", "", "", ""], [year4, month2, day2])
        assert fmt(sample_timestamp) == "20210501"

    def test_same_input_same_output(self, sample_timestamp):
        """Calling a template twice with equal timestamps gives identical text."""
        fmt = timestamp_template(["", " ", ""], [hours122, am_pm])
        first = fmt(sample_timestamp)
        second = fmt(Timestamp(**sample_timestamp.model_dump()))
        assert first == second == "11 AM"

    def test_templates_nest_as_formatters(self, sample_timestamp):
        """A template is itself a formatter and can fill a placeholder."""
        date = timestamp_template(["", "-", "-", ""], [year4, month2, day2])
        fmt = timestamp_template(["[", "]"], [date])
        assert fmt(sample_timestamp) == "[2021-05-01]"

    def test_accepts_any_callable(self):
        """Plain lambdas should work as formatters."""
        fmt = timestamp_template(["Q", ""], [lambda ts: str((ts.month - 1) // 3 + 1)])
        assert fmt(timestamp(year=2021, month=8, day=1)) == "Q3"

    def test_stores_segments_as_tuples(self):
        """Template segments should not be affected by later list changes."""
        texts = ["", "h"]
        fmt = timestamp_template(texts, [hours2])
        texts.append("oops")
        assert fmt.texts == ("", "h")
        assert fmt.formatters == (hours2,)

    def test_returns_timestamp_template(self):
        """timestamp_template should return a TimestampTemplate."""
        assert isinstance(timestamp_template(["", ""], [hours2]), TimestampTemplate)

    def test_repr_names_formatters(self):
        """repr should list formatter names."""
        fmt = timestamp_template(["", ":", ""], [hours2, minutes2])
        assert "hours2" in repr(fmt)
        assert "minutes2" in repr(fmt)


class TestTemplatePreconditions:
    """Construction-time checks."""

    def test_too_few_texts(self):
        """One text per formatter is one too few."""
        with pytest.raises(TemplateError) as exc_info:
            timestamp_template(["", ":"], [hours2, minutes2])

        assert exc_info.value.details == {"texts": 2, "formatters": 2}

    def test_too_many_texts(self):
        """Two extra texts should also be rejected."""
        with pytest.raises(TemplateError):
            timestamp_template(["", "", ""], [hours2])

    def test_empty_texts(self):
        """At least one text segment is always required."""
        with pytest.raises(TemplateError):
            timestamp_template([], [])

    def test_non_callable_formatter(self):
        """Placeholders must be callable."""
        with pytest.raises(TemplateError) as exc_info:
            timestamp_template(["", ""], ["hours2"])

        assert exc_info.value.details["index"] == 0


class TestCompileTemplate:
    """Tests for compile_template function."""

    def test_matches_explicit_template(self, sample_timestamp):
        """A pattern should behave like the equivalent explicit template."""
        explicit = timestamp_template(["", "-", ""], [year4, month2])
        compiled = compile_template("{year4}-{month2}")
        assert compiled(sample_timestamp) == explicit(sample_timestamp) == "2021-05"
        assert compiled.texts == explicit.texts
        assert compiled.formatters == explicit.formatters

    def test_names_and_words(self, sample_timestamp):
        """Name formatters should be usable from patterns."""
        fmt = compile_template("{day_of_week}, {day} {month_name} {year}")
        assert fmt(sample_timestamp) == "Saturday, 1 May 2021"

    def test_escaped_braces(self, sample_timestamp):
        """Doubled braces should render as literal braces."""
        assert compile_template("{{{year4}}}")(sample_timestamp) == "{2021}"

    def test_pattern_without_placeholders(self, sample_timestamp):
        """Plain text should compile to a constant template."""
        assert compile_template("now")(sample_timestamp) == "now"

    def test_unknown_formatter(self):
        """Unknown placeholder names should be rejected."""
        with pytest.raises(TemplateError) as exc_info:
            compile_template("{fortnight}")

        assert exc_info.value.details["placeholder"] == "fortnight"

    @pytest.mark.parametrize("pattern", ["{year4:>6}", "{year4!r}"])
    def test_format_specs_rejected(self, pattern):
        """Format specs and conversions should be rejected."""
        with pytest.raises(TemplateError):
            compile_template(pattern)

    def test_empty_placeholder(self):
        """An empty placeholder should be rejected."""
        with pytest.raises(TemplateError):
            compile_template("{}")

    @pytest.mark.parametrize("pattern", ["{year4", "year4}"])
    def test_unbalanced_braces(self, pattern):
        """Unbalanced braces should raise TemplateError, not ValueError."""
        with pytest.raises(TemplateError):
            compile_template(pattern)


class TestParsePattern:
    """Tests for parse_pattern function."""

    def test_splits_texts_and_formatters(self):
        """There should always be one more text than formatters."""
        texts, fmts = parse_pattern("T{hours2}:{minutes2}Z")
        assert texts == ["T", ":", "Z"]
        assert fmts == [hours2, minutes2]
