"""Validate a command's output dict against its registered schema."""

from collections.abc import Callable
from typing import Any

from . import _output_schemas  # noqa: F401
from ._output_schemas._registry import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate output of a ``cmd_*`` function against its registered schema.

    The domain is the package the command lives in and the command name is the
    function name without its ``cmd_`` prefix. Unregistered commands pass through.

    Raises:
        ValueError: If the output does not conform to the schema
    """
    module = getattr(func, "__module__", "") or ""
    parts = module.split(".")
    if len(parts) < 2:
        return output
    domain = parts[-2]
    command_name = getattr(func, "__name__", "").removeprefix("cmd_")
    schema = get_output_schema(domain, command_name)
    if schema is None:
        return output
    try:
        return schema(**output).model_dump(mode="python")
    except Exception as e:
        raise ValueError(f"{domain}.{command_name}: {e}") from e
