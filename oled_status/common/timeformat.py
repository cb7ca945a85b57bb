"""
Conversion of time layouts into strftime patterns.

Besides plain strftime patterns (anything containing '%'), a time format can be
written as a layout of the reference time 'Mon Jan 2 15:04:05 MST 2006'.
E.g. '15:04:05' becomes '%H:%M:%S', '02.01.2006' becomes '%d.%m.%Y' and '3:04PM' becomes '%-I:%M%p'.
The unpadded tokens ('1', '2', '_2', '3', '4', '5') need the glibc/BSD strftime extensions.
"""
import re
from typing import Final

DEFAULT_TIME_FORMAT: Final[str] = "%H:%M:%S"

# longest tokens first, otherwise '2006' would be split into '20' + '06'
_LAYOUT_TOKENS: Final[dict[str, str]] = {
    "2006": "%Y",
    "January": "%B",
    "Monday": "%A",
    "-0700": "%z",
    "Jan": "%b",
    "Mon": "%a",
    "MST": "%Z",
    "PM": "%p",
    "01": "%m",
    "02": "%d",
    "03": "%I",
    "04": "%M",
    "05": "%S",
    "06": "%y",
    "15": "%H",
    "_2": "%e",
    "1": "%-m",
    "2": "%-d",
    "3": "%-I",
    "4": "%-M",
    "5": "%-S",
}
_LAYOUT_RE: Final[re.Pattern[str]] = re.compile("|".join(re.escape(t) for t in _LAYOUT_TOKENS))


def to_strftime(time_format: str) -> str:
    """
    @param time_format: A strftime pattern or a reference time layout.
                        An empty string selects the default 24-hour format.
    @return: The corresponding strftime pattern.
    """
    if not time_format:
        return DEFAULT_TIME_FORMAT

    if "%" in time_format:
        # already a strftime pattern
        return time_format

    return _LAYOUT_RE.sub(lambda m: _LAYOUT_TOKENS[m.group(0)], time_format)
