"""
Header-driven partition of a flat sequence.

    c c H c H c c H   ->   before = [c, c]
                           after  = [(H, [c]), (H, [c, c]), (H, [])]

Content before the first header is ``before``; every header owns the
content that follows it up to the next header or the end.
"""

from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

T = TypeVar('T')


def split_vec(
    items: Iterable[T],
    is_header: Callable[[T], bool],
) -> Tuple[List[T], List[Tuple[T, List[T]]]]:
    """
    Split ``items`` into a leading content run and (header, run) pairs.

    Args:
        items: the sequence to partition, in order
        is_header: tells headers from content

    Returns:
        (before, after). Without any header, ``before`` is the whole input
        and ``after`` is empty; with headers only, ``before`` is empty and
        each header gets an empty run.
    """
    before: List[T] = []
    after: List[Tuple[T, List[T]]] = []
    current_header: Optional[T] = None
    seen_header = False
    current: List[T] = []

    for item in items:
        if not is_header(item):
            current.append(item)
            continue
        if seen_header:
            after.append((current_header, current))
        else:
            before = current
            seen_header = True
        current_header = item
        current = []

    if seen_header:
        after.append((current_header, current))
    else:
        before = current
    return before, after
