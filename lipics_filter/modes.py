"""
Output modes and their selection.

The mode is decided once per run from the CLI target and the document
metadata; it cannot change during the traversal.
"""

import logging
from enum import Enum
from typing import Optional

from config.constants import MODE_LATEX, MODE_FAST_LATEX, MODE_PANDOC, LATEX_TARGET

logger = logging.getLogger(__name__)


class OutputMode(Enum):
    """How directives and theorems are rendered."""
    LATEX = MODE_LATEX            # delegate to the LaTeX knowledge package
    FAST_LATEX = MODE_FAST_LATEX  # self-contained macros, single LaTeX pass
    PANDOC = MODE_PANDOC          # anchors and links, any output format

    @property
    def is_latex(self) -> bool:
        return self in (OutputMode.LATEX, OutputMode.FAST_LATEX)


def select_mode(target: Optional[str], requested: Optional[str], default: str = MODE_PANDOC) -> OutputMode:
    """
    Pick the output mode for a run.

    The metadata (or the configured default) is honoured only when the
    target renderer is LaTeX; any other target gets the pandoc mode, since
    the LaTeX macros are meaningless there.
    """
    if target != LATEX_TARGET:
        logger.debug(f"Target {target!r} is not LaTeX, using pandoc mode")
        return OutputMode.PANDOC

    name = requested if requested is not None else default
    try:
        mode = OutputMode(name)
    except ValueError:
        logger.warning(f"Unknown knowledge mode {name!r}, falling back to pandoc mode")
        return OutputMode.PANDOC

    logger.debug(f"Using {mode.value} mode")
    return mode
