import re

from snippet_resolver.models import LineRange

_LINE_RANGE = re.compile(r"(?:^|-)L(?P<start>\d+)(?:C\d+)?(?:-L(?P<end>\d+)(?:C\d+)?)?$")
_LINE_MARKER = re.compile(r"^L|-L\d*$")


def resolve_lines(opts: str | None) -> LineRange:
    """Parse an ``L<start>[-L<end>]`` qualifier into a line range.

    A qualifier without any line marker (or no qualifier) selects the whole
    file. Anything that looks like a marker but does not parse falls back to
    the first line.
    """
    if not opts:
        return LineRange(full_file=True)

    found = _LINE_RANGE.search(opts)
    if found is None:
        if _LINE_MARKER.search(opts):
            return LineRange()
        return LineRange(full_file=True)

    start_line = int(found.group("start"))
    if start_line < 1:
        return LineRange()
    end = found.group("end")
    return LineRange(start_line=start_line, end_line=int(end) if end else None)


def strip_line_markers(opts: str) -> str:
    """Remove every ``-L<n>`` marker from a qualifier."""
    return re.sub(r"(?:-L\d+(?:C\d+)?)+", "", opts)
