"""Version command - snapaio and array tool versions."""

from collections.abc import Iterator

from ...utils.get_package_version import get_package_version
from ..array.ArrayTool import ArrayTool
from ..StageResult import StageResult
from .._output_schemas.config import ConfigVersionOutput
from .ConfigMissing import ConfigMissing
from .SnapConfig import SnapConfig


def cmd_version() -> StageResult:
    """Get version information. The array tool version is best effort."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Getting package version...")
        version = get_package_version()
        warnings: list[str] = []

        yield (0.6, "Querying array tool...")
        tool_version = ""
        try:
            config = SnapConfig.load()
            tool = ArrayTool(config.array.binary)
            tool.check()
            tool_version = tool.version()
        except ConfigMissing as e:
            warnings.append(str(e))

        result_obj.result = f"snapaio version: {version}"
        result_obj.output = ConfigVersionOutput(
            errors=[], warnings=warnings, version=version, tool_version=tool_version
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce="Getting version information...", progress_callback=do_work)
