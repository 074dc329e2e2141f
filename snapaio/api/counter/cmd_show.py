"""Counter show command."""

from collections.abc import Iterator

from ..config.ConfigMissing import ConfigMissing
from ..config.SnapConfig import SnapConfig
from ..StageResult import StageResult
from .._output_schemas.counter import CounterShowOutput
from .CounterStore import CounterStore


def cmd_show() -> StageResult:
    """Show the persisted sync-warning and scrub-delay counters."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = SnapConfig.load()
        except ConfigMissing as e:
            result_obj.result = str(e)
            result_obj.output = CounterShowOutput(
                errors=[str(e)], warnings=[], counters={}, paths={}
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.6, "Reading counters...")
        store = CounterStore.from_config(config.state)
        counters = {kind.value: store.read(kind) for kind in store.paths}
        paths = {kind.value: str(path) for kind, path in store.paths.items()}

        result_obj.result = ", ".join(f"{k}={v}" for k, v in counters.items())
        result_obj.output = CounterShowOutput(
            errors=[], warnings=[], counters=counters, paths=paths
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce="Reading counters...", progress_callback=do_work)
