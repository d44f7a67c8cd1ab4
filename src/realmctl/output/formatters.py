"""Rich/JSON output selection.

The CLI renders ServiceResult for humans (Rich tables, status lines) or
machines (--json). The formatter picks the mode from OutputSettings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from realmctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from realmctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output-mode flags resolved from global CLI options."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    indent: int = 2


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    ``--json`` wins over ``--quiet``, which wins over the Rich renderers.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, indent=settings.indent)
