"""Sequences one maintenance run."""

import dataclasses
import re
import smtplib
from collections.abc import Callable, Iterator
from pathlib import Path

from ...utils.format_elapsed import format_elapsed
from ...utils.get_package_version import get_package_version
from ..array.ArrayTool import ArrayTool
from ..array.ArtifactMissing import ArtifactMissing
from ..array.check_artifacts import check_artifacts
from ..array.read_array_layout import read_array_layout
from ..array.run_streaming import run_streaming
from ..array.StepResult import StepResult
from ..config.SnapConfig import SnapConfig
from ..counter.CounterKind import CounterKind
from ..counter.CounterStore import CounterStore
from ..diff.ParseFailure import ParseFailure
from ..diff.parse_change_summary import parse_change_summary
from ..notify.Notifier import Notifier
from ..policy.decide_scrub import decide_scrub
from ..policy.decide_sync import decide_sync
from ..report.build_report import build_report
from ..report.classify_subject import classify_subject
from ..RunAbort import RunAbort
from .RunContext import RunContext
from .RunLog import RunLog

_ZERO_SUBSECOND = re.compile(r"^You have ([1-9][0-9]*) files with zero sub-second timestamp\.", re.MULTILINE)


class RunCoordinator:
    """Runs DIFF, then SYNC and SCRUB as the policy allows, then post-processing and the report.

    Every external step is attempted at most once. A failing step is recorded
    and the run carries on; only missing artifacts and unparseable DIFF output
    abort it, after a diagnostic notification.
    """

    def __init__(
        self,
        config: SnapConfig,
        tool: ArrayTool | None = None,
        counters: CounterStore | None = None,
        notifier: Notifier | None = None,
        log: RunLog | None = None,
    ):
        log = log or RunLog(Path(config.report.output_file), Path(config.log.operator_log))
        if tool is None:
            tool = ArrayTool(config.array.binary, sink=log.tee)
        elif tool.sink is None:
            tool.sink = log.tee
        self.ctx = RunContext(
            config=config,
            counters=counters or CounterStore.from_config(config.state),
            tool=tool,
            log=log,
            notifier=notifier or Notifier(config.notify),
        )

    def run(self) -> RunContext:
        """Execute the whole run and return its context."""
        for _ in self.iter_run():
            pass
        return self.ctx

    def iter_run(self) -> Iterator[tuple[float, str]]:
        """Execute the run as a generator of (progress, message) tuples.

        Raises:
            RunAbort: ConfigMissing, ArtifactMissing or ParseFailure
        """
        ctx = self.ctx
        try:
            with ctx.notifier:
                yield (0.05, "Checking configuration...")
                self._preflight()
                yield (0.15, "Running DIFF...")
                self._diff()
                yield (0.35, "Deciding on SYNC...")
                self._sync()
                yield (0.6, "Deciding on SCRUB...")
                self._scrub()
                yield (0.8, "Post-processing...")
                self._postprocess()
                yield (0.9, "Sending report...")
                self._report()
        finally:
            ctx.log.close()
        yield (1.0, "Complete")

    # -- phases -----------------------------------------------------------

    def _preflight(self) -> None:
        ctx = self.ctx
        log = ctx.log
        ctx.tool.check()
        ctx.layout = read_array_layout(Path(ctx.config.array.config_file))

        log.elog("INFO", "SnapRAID Script Job started.")
        tool_version = ctx.tool.version()
        if tool_version:
            log.elog("INFO", f"Running SnapRAID version {tool_version}")
        log.elog("INFO", f"snapaio version {get_package_version()}")

        log.ruler()
        log.h2("Preprocessing")
        log.elog("INFO", "Configuration file found! Proceeding.")
        log.elog("INFO", "Checking SnapRAID disks.")
        try:
            check_artifacts(ctx.layout)
        except ArtifactMissing as e:
            log.elog("ERROR", f"**ERROR** {e}")
            log.elog(
                "ERROR",
                "**ERROR** Please check the status of your disks! The script exits here due to missing file or disk...",
            )
            self._abort(e, verbose=False)
            raise
        log.line("All parity files found. Continuing...")

    def _diff(self) -> None:
        ctx = self.ctx
        log = ctx.log
        log.ruler()
        log.h2("Processing")
        log.h3("SnapRAID DIFF")
        log.elog("INFO", "DIFF Job started.")
        result = self._step(ctx.tool.diff)
        log.elog("INFO", "DIFF finished.")
        ctx.outcome.ran_diff = True
        ctx.outcome.jobs.append("DIFF")

        try:
            ctx.summary = parse_change_summary(result.output)
        except ParseFailure as e:
            log.elog("ERROR", f"**ERROR** {e}")
            self._abort(e, verbose=True)
            raise
        log.elog("INFO", f"**SUMMARY of changes - {ctx.summary.describe()}**")

    def _sync(self) -> None:
        ctx = self.ctx
        assert ctx.summary is not None
        verdict = decide_sync(ctx.summary, ctx.config.thresholds, ctx.counters)
        ctx.sync_verdict = verdict
        self._notes(verdict.notes)
        if not verdict.runs:
            return

        if not self._pre_sync_hooks():
            ctx.outcome.pre_sync_failed = True
            return

        log = ctx.log
        log.h3("SnapRAID SYNC")
        log.elog("INFO", "SYNC Job started.")
        array = ctx.config.array
        result = self._step(lambda: ctx.tool.sync(prehash=array.prehash, quiet=array.quiet))
        log.elog("INFO", "SYNC finished.")
        ctx.sync_result = result
        ctx.outcome.ran_sync = True
        ctx.outcome.sync_succeeded = result.saw_completion_marker
        ctx.outcome.jobs.append("SYNC")
        # any executed sync ends the warning streak, including a manual catch-up
        ctx.counters.clear(CounterKind.SYNC_WARN)

    def _scrub(self) -> None:
        ctx = self.ctx
        log = ctx.log
        assert ctx.sync_verdict is not None
        log.h3("SnapRAID SCRUB")
        verdict = decide_scrub(ctx.config.scrub, ctx.sync_verdict, ctx.sync_result, ctx.counters)
        ctx.scrub_verdict = verdict
        self._notes(verdict.notes)
        if not verdict.runs:
            return

        scrub = ctx.config.scrub
        log.elog("INFO", "SCRUB Job started.")
        result = self._step(lambda: ctx.tool.scrub(scrub.percent, scrub.age_days, quiet=ctx.config.array.quiet))
        log.elog("INFO", "SCRUB finished.")
        ctx.outcome.ran_scrub = True
        ctx.outcome.scrub_succeeded = result.saw_completion_marker
        ctx.outcome.jobs.append("SCRUB")
        ctx.counters.clear(CounterKind.SCRUB_DELAY)

    def _postprocess(self) -> None:
        ctx = self.ctx
        log = ctx.log
        post = ctx.config.postprocess
        log.ruler()
        log.h2("Postprocessing")
        if post.touch:
            self._touch()
        if post.smart:
            log.h3("SnapRAID SMART")
            self._step(ctx.tool.smart)
        if post.status:
            log.h3("SnapRAID STATUS")
            self._step(ctx.tool.status)
        if post.spindown:
            log.h3("SnapRAID SPINDOWN")
            self._step(ctx.tool.down)
        log.elog("INFO", "All jobs ended.")

    def _report(self) -> None:
        ctx = self.ctx
        log = ctx.log
        if ctx.notifier.enabled:
            log.line(f"Email address is set. Sending email report to **{ctx.notifier.notify_config.recipient}**")
        ctx.subject = classify_subject(
            ctx.outcome,
            ctx.sync_verdict,
            ctx.summary,
            ctx.config.thresholds,
            ctx.config.report.subject_prefix,
        )
        log.ruler()
        log.h2(f"Total time elapsed for SnapRAID: {format_elapsed(ctx.elapsed)}")
        self._send(ctx.config.report.verbose)

    # -- helpers ------------------------------------------------------------

    def _touch(self) -> None:
        ctx = self.ctx
        log = ctx.log
        log.h3("SnapRAID TOUCH")
        log.elog("INFO", "TOUCH started.")
        log.line("Checking for zero sub-second files.")
        status = ctx.tool.status(tee=False)
        ctx.outcome.record(dataclasses.replace(status, name="status_touch"))
        match = _ZERO_SUBSECOND.search(status.output)
        if match:
            log.line(f"Found {match.group(1)} files with zero sub-second timestamp.")
            log.line("Running TOUCH job to timestamp.")
            self._step(ctx.tool.touch)
        else:
            log.line("No zero sub-second timestamp files found.")
        log.elog("INFO", "TOUCH finished.")

    def _pre_sync_hooks(self) -> bool:
        ctx = self.ctx
        log = ctx.log
        for command in ctx.config.hooks.pre_sync:
            log.elog("INFO", f"Running pre-sync command: {command}")
            log.codeblock()
            status, _ = run_streaming(command, log.tee, shell=True)
            log.codeblock()
            if status != 0:
                log.elog(
                    "ERROR",
                    f"**ERROR** Pre-sync command failed with status {status}: {command}. **NOT** proceeding with SYNC job.",
                )
                return False
        return True

    def _step(self, call: Callable[[], StepResult]) -> StepResult:
        log = self.ctx.log
        log.codeblock()
        result = call()
        log.codeblock()
        log.line(f"Waited for {format_elapsed(result.elapsed_secs)}.")
        self.ctx.outcome.record(result)
        if not result.completed:
            log.elog("WARN", f"**WARNING** {result.name.upper()} exited with status {result.exit_status}.")
        return result

    def _notes(self, notes: tuple[tuple[str, str], ...]) -> None:
        for level, message in notes:
            self.ctx.log.elog(level, message)

    def _abort(self, error: RunAbort, verbose: bool) -> None:
        ctx = self.ctx
        ctx.subject = f"{error.subject} {ctx.config.report.subject_prefix}".rstrip()
        self._send(verbose)

    def _send(self, verbose: bool) -> None:
        ctx = self.ctx
        if not ctx.notifier.enabled:
            return
        report = build_report(ctx.subject, ctx.log.read(), verbose=verbose)
        try:
            ctx.notified = ctx.notifier.send(report.subject, report.text, report.html)
        except (OSError, RuntimeError, smtplib.SMTPException) as e:
            message = f"Failed to send report: {e}"
            ctx.warnings.append(message)
            ctx.log.elog("ERROR", message)
