"""Counter clear command - resets a warning or delay streak by hand."""

from collections.abc import Iterator

from ..config.ConfigMissing import ConfigMissing
from ..config.SnapConfig import SnapConfig
from ..StageResult import StageResult
from .._output_schemas.counter import CounterClearOutput
from .CounterKind import CounterKind
from .CounterStore import CounterStore


def cmd_clear(kind: str = "") -> StageResult:
    """Clear one counter, or both when ``kind`` is empty.

    Args:
        kind: "sync_warn", "scrub_delay" or "" for both
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            kinds = [CounterKind(kind)] if kind else list(CounterKind)
        except ValueError:
            supported = [k.value for k in CounterKind]
            msg = f"Unknown counter: {kind!r} (supported: {supported})"
            result_obj.result = msg
            result_obj.output = CounterClearOutput(errors=[msg], warnings=[], cleared=[]).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        try:
            config = SnapConfig.load()
        except ConfigMissing as e:
            result_obj.result = str(e)
            result_obj.output = CounterClearOutput(errors=[str(e)], warnings=[], cleared=[]).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.6, "Clearing counters...")
        store = CounterStore.from_config(config.state)
        cleared = [k.value for k in kinds if store.clear(k)]

        result_obj.result = f"Cleared {len(cleared)} counter(s)"
        result_obj.output = CounterClearOutput(errors=[], warnings=[], cleared=cleared).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce="Clearing counters...", progress_callback=do_work)
