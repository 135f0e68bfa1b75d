"""
LIPIcs pandoc filter.

Rewrites knowledge directives and theorem environments of a pandoc
document, either into LaTeX macros or into format-neutral anchors, links
and Divs.
"""

from .filter import FilterError, FilterInputError, LipicsFilter, run_filter
from .modes import OutputMode, select_mode

__version__ = "0.1.0"

__all__ = [
    'FilterError',
    'FilterInputError',
    'LipicsFilter',
    'run_filter',
    'OutputMode',
    'select_mode',
]
