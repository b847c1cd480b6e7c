"""Tests for field normalization helpers."""

from job_board.utils.text_processing import (
    format_date_range,
    join_present,
    parse_repeatable,
    sanitize_text,
)


class TestParseRepeatable:
    def test_list_passes_through(self):
        assert parse_repeatable(["Go", "Rust"]) == ["Go", "Rust"]

    def test_comma_delimited_string(self):
        assert parse_repeatable("Go, Rust , TypeScript") == ["Go", "Rust", "TypeScript"]

    def test_empty_segments_dropped(self):
        assert parse_repeatable("Go,, ,Rust,") == ["Go", "Rust"]

    def test_json_array_string(self):
        assert parse_repeatable('["Go","Rust"]') == ["Go", "Rust"]

    def test_json_array_not_split_on_commas(self):
        assert parse_repeatable('["Go, Rust"]') == ["Go, Rust"]

    def test_json_array_of_records(self):
        assert parse_repeatable('[{"role": "Engineer"}]') == [{"role": "Engineer"}]

    def test_json_non_array_is_empty(self):
        assert parse_repeatable('{"role": "Engineer"}') == []
        assert parse_repeatable("42") == []

    def test_malformed_json_falls_back_to_split(self):
        assert parse_repeatable('["Go", "Rust"') == ['["Go"', '"Rust"']

    def test_missing_values(self):
        assert parse_repeatable(None) == []
        assert parse_repeatable("") == []
        assert parse_repeatable([]) == []

    def test_unsupported_type_is_empty(self):
        assert parse_repeatable(7) == []


class TestSanitizeText:
    def test_trims(self):
        assert sanitize_text("  Ada  ") == "Ada"

    def test_none_is_empty(self):
        assert sanitize_text(None) == ""

    def test_non_string(self):
        assert sanitize_text(2021) == "2021"


class TestJoinPresent:
    def test_skips_empty_parts(self):
        assert join_present(["Nigeria", ""], " · ") == "Nigeria"
        assert join_present(["", ""], " · ") == ""
        assert join_present(["Nigeria", "Senior"], " · ") == "Nigeria · Senior"


class TestFormatDateRange:
    def test_start_and_end(self):
        assert format_date_range("2019", "2021") == "2019 - 2021"

    def test_current_overrides_end(self):
        assert format_date_range("2019", "2021", True) == "2019 - Present"

    def test_current_without_start(self):
        assert format_date_range("", "", True) == "Present"

    def test_only_start(self):
        assert format_date_range("2019", None) == "2019"

    def test_only_end(self):
        assert format_date_range(None, "2021") == "2021"

    def test_neither(self):
        assert format_date_range(None, " ") == ""
