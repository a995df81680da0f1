"""Tests for printf-style message rendering."""

from ipmilog.domain.services.printf import format_message


class TestFormatMessage:
    def test_positional_substitution(self):
        assert format_message("%s: 0x%02x (%d)", ("cmd", 10, 3)) == "cmd: 0x0a (3)"

    def test_mapping_substitution(self):
        assert format_message("%(name)s=%(value)d", ({"name": "lun", "value": 2},)) == (
            "lun=2"
        )

    def test_no_args_leaves_format_untouched(self):
        assert format_message("100% done") == "100% done"

    def test_none_format_renders_empty(self):
        assert format_message(None, (1, 2)) == ""

    def test_mismatched_args_degrade_instead_of_raising(self):
        assert format_message("%d items", ("many",)) == "%d items ['many']"

    def test_too_few_args_degrade(self):
        assert format_message("%s and %s", ("one",)) == "%s and %s ['one']"
