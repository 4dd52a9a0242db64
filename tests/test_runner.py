"""Tests for running shell commands."""

import io

import pytest

from helm_templexer.core.errors import CommandFailedError
from helm_templexer.execution.runner import is_failure, run_command


class TestIsFailure:
    def test_zero_exit_without_marker_succeeds(self):
        assert not is_failure(0, "kind: Deployment\n")

    def test_marker_fails_despite_zero_exit(self):
        assert is_failure(0, "Error: plugin failed: exit status 1\n")

    def test_nonzero_exit_fails(self):
        assert is_failure(2, "")

    def test_marker_is_case_sensitive(self):
        assert not is_failure(0, "Exit Status 1")


class TestRunCommand:
    def test_output_is_written_to_sink(self):
        sink = io.StringIO()

        output = run_command("printf 'kind: ConfigMap\\n'", sink)

        assert output == "kind: ConfigMap\n"
        assert sink.getvalue() == "kind: ConfigMap\n"

    def test_stderr_is_merged(self):
        sink = io.StringIO()

        run_command("echo out; echo err 1>&2", sink)

        assert "out" in sink.getvalue()
        assert "err" in sink.getvalue()

    def test_nonzero_exit_raises_without_writing(self):
        sink = io.StringIO()

        with pytest.raises(CommandFailedError) as exc_info:
            run_command("echo partial; exit 3", sink)

        assert sink.getvalue() == ""
        assert exc_info.value.returncode == 3
        assert exc_info.value.output == "partial\n"
        assert exc_info.value.command == "echo partial; exit 3"

    def test_marker_in_output_raises(self):
        sink = io.StringIO()

        with pytest.raises(CommandFailedError) as exc_info:
            run_command("echo 'Error: exit status 1'", sink)

        assert exc_info.value.returncode == 0
        assert sink.getvalue() == ""

    def test_pipes_are_run_by_the_shell(self):
        output = run_command("printf 'a\\nimage: x\\nb\\n' | grep image")

        assert output == "image: x\n"

    def test_missing_pipe_tool_fails(self):
        with pytest.raises(CommandFailedError):
            run_command("echo hi | xyz-does-not-exist-anywhere")

    def test_runs_in_working_directory(self, tmp_path):
        (tmp_path / "marker.txt").write_text("here\n")

        assert run_command("cat marker.txt", cwd=tmp_path) == "here\n"

    def test_missing_working_directory_fails(self, tmp_path):
        gone = tmp_path / "gone"

        with pytest.raises(CommandFailedError) as exc_info:
            run_command("echo hi", cwd=gone)
        assert exc_info.value.returncode == -1
