import pathlib
import sys

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from k8sacc.errors import CommandFailedError  # noqa: E402
from k8sacc.execution.command import CommandResult, CommandSpec, run  # noqa: E402


def test_spec_renders_shell_quoted():
    spec = CommandSpec("doctl", ("kubernetes", "cluster", "kubeconfig", "save", "my cluster"))
    assert str(spec) == "doctl kubernetes cluster kubeconfig save 'my cluster'"


def test_zero_exit_succeeds():
    result = run(CommandSpec(sys.executable, ("-c", "pass")))

    assert result.succeeded
    assert result.returncode == 0


def test_non_zero_exit_captures_stderr():
    script = "import sys; sys.stderr.write('boom'); sys.exit(3)"
    result = run(CommandSpec(sys.executable, ("-c", script)))

    assert not result.succeeded
    assert result.returncode == 3
    assert result.stderr_text == "boom"


def test_stderr_text_replaces_undecodable_bytes():
    assert CommandResult(returncode=1, stderr=b"bad \xfe byte").stderr_text == "bad � byte"


def test_launch_failure_is_command_failed(tmp_path):
    missing = tmp_path / "no-such-tool"

    with pytest.raises(CommandFailedError) as exc:
        run(CommandSpec(str(missing), ("--version",)))
    assert exc.value.detail


def test_embedded_null_byte_is_command_failed():
    with pytest.raises(CommandFailedError) as exc:
        run(CommandSpec("doctl", ("kubernetes", "cluster", "kubeconfig", "save", "a\0b")))
    assert "null byte" in exc.value.detail
