"""Show configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.config import ConfigShowOutput
from .ConfigMissing import ConfigMissing
from .SnapConfig import SnapConfig


def cmd_show(section: str = "") -> StageResult:
    """Show configuration section or list all sections.

    Args:
        section: Section name. Empty string lists all section names, otherwise returns specific section.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        config_path = str(SnapConfig.get_config_path())
        try:
            config = SnapConfig.load()
        except ConfigMissing as e:
            result_obj.result = str(e)
            result_obj.output = ConfigShowOutput(
                errors=[str(e)], warnings=[], section=section, content={}, config_path=config_path
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.6, "Processing sections...")
        config_dict = config.to_dict()
        available_sections = list(config_dict.keys())

        if section == "":
            result_obj.result = f"Found {len(available_sections)} section(s)"
            content = {"sections": available_sections}
            errors: list[str] = []
        elif section not in available_sections:
            result_obj.result = f"Section '{section}' not found"
            content = {}
            errors = [f"Unknown section: {section}"]
        else:
            result_obj.result = f"Retrieved configuration for '{section}'"
            content = config_dict[section]
            errors = []

        result_obj.output = ConfigShowOutput(
            errors=errors, warnings=[], section=section, content=content, config_path=config_path
        ).model_dump(mode="python")
        result_obj.success = not errors
        yield (1.0, "Complete")

    announce = "Listing configuration sections..." if section == "" else f"Showing configuration for section '{section}'..."
    return StageResult(announce=announce, progress_callback=do_work)
