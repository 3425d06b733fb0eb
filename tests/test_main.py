"""
Tests for the pipeline driver and exit status mapping.
"""

import sys

import pytest

from mac_setup.errors import SetupAborted
from mac_setup.lib.command import CmdResult
from mac_setup.main import build_steps, main, run
from mac_setup.pipeline import run_pipeline

from conftest import FakeNvm, FakeRunner, output_of


class Recorder:
    def __init__(self, step_id, log, abort=False):
        self.step_id = step_id
        self.log = log
        self.abort = abort

    def run(self, ctx):
        self.log.append(self.step_id)
        if self.abort:
            raise SetupAborted("stop")


class TestPipeline:
    def test_runs_in_order(self, make_ctx):
        log = []
        steps = [Recorder("a", log), Recorder("b", log)]

        result = run_pipeline(ctx=make_ctx(), steps=steps)

        assert log == ["a", "b"]
        assert result.ran_steps == ["a", "b"]
        assert result.aborted_at is None

    def test_abort_stops_remaining_steps(self, make_ctx):
        log = []
        steps = [Recorder("a", log), Recorder("b", log, abort=True), Recorder("c", log)]

        result = run_pipeline(ctx=make_ctx(), steps=steps)

        assert log == ["a", "b"]
        assert result.aborted_at == "b"

    def test_step_order(self):
        assert [s.step_id for s in build_steps()] == [
            "00_check_platform",
            "10_homebrew",
            "20_git",
            "30_node",
            "40_shell_profile",
            "50_optional_tools",
            "90_summary",
        ]


class TestRun:
    def test_unsupported_platform_exits_1_without_side_effects(self, make_ctx, home):
        runner = FakeRunner()
        ctx = make_ctx(["y"] * 20, runner=runner, platform="linux")

        assert run(ctx) == 1

        assert runner.calls == []
        assert ctx.reader.consumed == 0
        assert list(home.iterdir()) == []
        assert "This script is designed for macOS only" in output_of(ctx)

    def test_declining_nvm_exits_0_and_skips_later_steps(self, make_ctx, home):
        runner = FakeRunner()
        # brew install: n, git: n, nvm: n
        ctx = make_ctx(["n", "n", "n"], runner=runner)

        assert run(ctx) == 0

        assert runner.calls == []
        assert not (home / ".zshrc").exists()
        assert "Setup Complete!" not in output_of(ctx)

    def test_first_failing_command_sets_exit_status(self, make_ctx):
        def curl_fails(argv, input_text, env):
            if argv[0] == "curl":
                return CmdResult(argv=argv, returncode=22, stdout="", stderr="404")
            return None

        runner = FakeRunner(curl_fails)
        ctx = make_ctx(["y"], runner=runner)

        assert run(ctx) == 22
        assert "Command failed (22)" in output_of(ctx)

    def test_full_run(self, make_ctx, home, bin_dir):
        (home / ".nvm").mkdir()
        (home / ".nvm" / "nvm.sh").write_text("# nvm\n", encoding="utf-8")
        runner = FakeRunner(FakeNvm(home, str(bin_dir)))
        # brew: n; git: n; node version: 20.10.0; optional tools: n, n, n
        ctx = make_ctx(["n", "n", "20.10.0", "n", "n", "n"], runner=runner)

        assert run(ctx) == 0

        assert ctx.reader.remaining == 0
        assert "NVM_DIR" in (home / ".zshrc").read_text(encoding="utf-8")
        out = output_of(ctx)
        assert "Setup Complete!" in out
        assert "• Node.js: v20.10.0" in out

    def test_unexpected_errors_propagate(self, make_ctx):
        class Boom:
            step_id = "00_boom"

            def run(self, ctx):
                raise ValueError("boom")

        with pytest.raises(ValueError):
            run_pipeline(ctx=make_ctx(), steps=[Boom()])


class TestMain:
    def test_unsupported_platform_leaves_home_untouched(self, home, monkeypatch, capsys):
        monkeypatch.setenv("HOME", str(home))
        monkeypatch.setattr(sys, "platform", "linux")

        assert main([]) == 1

        assert list(home.iterdir()) == []
        assert "This script is designed for macOS only" in capsys.readouterr().out
