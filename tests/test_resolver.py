"""Tests for scripty/resolver.py"""

import os
import stat

import pytest

from scripty.errors import DuplicateScriptError, ExecutionError, ScriptNotFoundError
from scripty.resolver import build_argv, find_duplicates, find_script, run_interactively
from scripty.scripts import ScriptRecord

RECORDS = [
    ScriptRecord(name="deploy", suffix=".sh", path="/s/deploy.sh"),
    ScriptRecord(name="backup", suffix=".py", path="/s/backup.py"),
    ScriptRecord(name="README", suffix="", path="/s/README"),
]


def _executable(fp, body):
    fp.write_text(body, encoding="utf-8")
    fp.chmod(fp.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return fp


class TestFindScript:
    def test_bare_name_and_full_name_hit_same_record(self):
        assert find_script(RECORDS, "deploy") is RECORDS[0]
        assert find_script(RECORDS, "deploy.sh") is RECORDS[0]

    def test_wrong_suffix_is_not_found(self):
        with pytest.raises(ScriptNotFoundError) as exc_info:
            find_script(RECORDS, "deploy.py")
        assert exc_info.value.message == "argument not found in scripts: deploy.py"

    def test_no_suffix_record(self):
        assert find_script(RECORDS, "README") is RECORDS[2]

    def test_first_match_wins(self):
        records = [
            ScriptRecord(name="build", suffix=".sh", path="/s/one/build.sh"),
            ScriptRecord(name="build", suffix=".py", path="/s/two/build.py"),
        ]
        assert find_script(records, "build").path == "/s/one/build.sh"
        assert find_script(records, "build.py").path == "/s/two/build.py"

    def test_strict_mode_rejects_ambiguous_name(self):
        records = [
            ScriptRecord(name="build", suffix=".sh", path="/s/one/build.sh"),
            ScriptRecord(name="build", suffix=".py", path="/s/two/build.py"),
        ]
        with pytest.raises(DuplicateScriptError) as exc_info:
            find_script(records, "build", strict=True)
        assert exc_info.value.details["paths"] == ["/s/one/build.sh", "/s/two/build.py"]
        # Spelling out the suffix makes it unique again
        assert find_script(records, "build.py", strict=True).path == "/s/two/build.py"

    def test_empty_records(self):
        with pytest.raises(ScriptNotFoundError):
            find_script([], "deploy")


class TestFindDuplicates:
    def test_reports_shared_names(self):
        records = RECORDS + [ScriptRecord(name="deploy", suffix="", path="/s/x/deploy")]
        assert find_duplicates(records) == {"deploy": ["/s/deploy.sh", "/s/x/deploy"]}

    def test_no_duplicates(self):
        assert find_duplicates(RECORDS) == {}


class TestBuildArgv:
    def test_replaces_typed_name(self):
        assert build_argv(RECORDS[0], ["deploy", "--env", "prod"]) == ["/s/deploy.sh", "--env", "prod"]

    def test_does_not_mutate_input(self):
        argv = ["deploy.sh"]
        assert build_argv(RECORDS[0], argv) == ["/s/deploy.sh"]
        assert argv == ["deploy.sh"]


class TestRunInteractively:
    def test_success(self, tmp_path):
        out = tmp_path / "out.txt"
        script = _executable(tmp_path / "ok.sh", f'#!/bin/sh\necho "$@" > "{out}"\n')
        run_interactively([str(script), "a", "b c"])
        assert out.read_text(encoding="utf-8") == "a b c\n"

    def test_child_failure_raises(self, tmp_path):
        script = _executable(tmp_path / "fail.sh", "#!/bin/sh\nexit 3\n")
        with pytest.raises(ExecutionError) as exc_info:
            run_interactively([str(script)])
        assert exc_info.value.details["returncode"] == 3
        assert exc_info.value.exit_status() == 3

    def test_not_executable_raises(self, tmp_path):
        script = tmp_path / "plain.sh"
        script.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
        os.chmod(script, 0o644)
        with pytest.raises(ExecutionError):
            run_interactively([str(script)])
