"""Unit tests for CommandPipeline."""

from diff_sentinel.application.command_pipeline import CommandPipeline
from diff_sentinel.domain.value_objects.command_result import CommandResult


class TestCommandPipeline:
    async def test_runs_every_command_in_order(self, reporter, make_runner, make_failure) -> None:
        runner = make_runner({"false": make_failure("false"), "exit 2": make_failure("exit 2", 2)})
        pipeline = CommandPipeline(runner, reporter)

        results = await pipeline.run_all(["false", "true", "exit 2"])

        assert runner.calls == ["false", "true", "exit 2"]
        assert [r.command for r in results] == ["false", "true", "exit 2"]
        assert [r.ok for r in results] == [False, True, False]

    async def test_duplicates_run_independently(self, reporter, make_runner) -> None:
        runner = make_runner()
        pipeline = CommandPipeline(runner, reporter)

        results = await pipeline.run_all(["make", "make"])

        assert len(results) == 2
        assert runner.calls == ["make", "make"]

    async def test_single_group_frames_the_batch(self, reporter, make_runner) -> None:
        pipeline = CommandPipeline(make_runner(), reporter)

        await pipeline.run_all(["a", "b", "c"])

        assert reporter.messages("group") == ["Running commands"]
        assert reporter.events[0] == ("group", "Running commands")
        assert reporter.events[-1] == ("endgroup", "")

    async def test_echoes_command_output(self, reporter, make_runner) -> None:
        runner = make_runner({"gen": CommandResult.success("gen", stdout="generated\n", stderr="")})
        pipeline = CommandPipeline(runner, reporter)

        await pipeline.run_all(["gen"])

        assert reporter.messages("info") == ["$ gen", "generated"]

    async def test_empty_list_yields_no_results(self, reporter, make_runner) -> None:
        pipeline = CommandPipeline(make_runner(), reporter)

        assert await pipeline.run_all([]) == []
