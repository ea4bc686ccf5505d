"""Tests for scripty/listing.py"""

from scripty.listing import NAME_COLUMN_WIDTH, render_details, render_names, truncation_warning
from scripty.scripts import ScriptRecord


def _record(name, suffix=".sh"):
    return ScriptRecord(name=name, suffix=suffix, path=f"/s/{name}{suffix}")


class TestRenderNames:
    def test_one_name_per_record(self):
        assert render_names([_record("deploy"), _record("backup", ".py")]) == ["deploy", "backup"]

    def test_empty(self):
        assert render_names([]) == []


class TestRenderDetails:
    def test_name_column_padded(self):
        descriptions = {"/s/deploy.sh": "Deploys the service", "/s/plain.sh": ""}
        lines, truncated = render_details([_record("deploy"), _record("plain")], describe=descriptions.get)
        assert lines[0] == "deploy".ljust(NAME_COLUMN_WIDTH) + " Deploys the service"
        assert lines[1] == "plain".ljust(NAME_COLUMN_WIDTH) + " "
        assert truncated is None

    def test_long_name_truncated(self):
        long_name = "a_really_long_script_name_that_overflows"
        lines, truncated = render_details([_record(long_name)], describe=lambda path: "doc")
        assert lines == [long_name[:NAME_COLUMN_WIDTH] + " doc"]
        assert truncated == long_name

    def test_exact_width_is_not_truncated(self):
        name = "x" * NAME_COLUMN_WIDTH
        _, truncated = render_details([_record(name)], describe=lambda path: "")
        assert truncated is None

    def test_reads_descriptions_from_disk(self, tmp_path):
        fp = tmp_path / "deploy.sh"
        fp.write_text("#!/bin/sh\n# Ship it\n", encoding="utf-8")
        record = ScriptRecord(name="deploy", suffix=".sh", path=str(fp))
        lines, _ = render_details([record])
        assert lines == ["deploy".ljust(NAME_COLUMN_WIDTH) + " Ship it"]


def test_truncation_warning():
    assert truncation_warning("long") == "'long' truncated for readability! Use 'scripty -l' instead."
