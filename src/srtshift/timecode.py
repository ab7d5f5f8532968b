"""
Conversion between SRT timecode ranges and offsets from the zero epoch.
"""
import re
from datetime import timedelta
from typing import Tuple

from .errors import MalformedTimecode


ZERO_TIME = timedelta( 0 );
TIME_SEPARATOR = " --> ";

ONE_MILLISECOND = timedelta( milliseconds=1 );

# h:m:s,ms --> h:m:s,ms ; any hour width, trailing text (e.g. position hints) ignored
_TIMECODE_RANGE = re.compile(
    r"\s*(\d+):(\d+):(\d+),(\d+)" + re.escape( TIME_SEPARATOR ) + r"(\d+):(\d+):(\d+),(\d+)",
    re.ASCII
);


def _to_timedelta( hours: str, minutes: str, seconds: str, millis: str ) -> timedelta:
    return timedelta(
        hours=int( hours ),
        minutes=int( minutes ),
        seconds=int( seconds ),
        milliseconds=int( millis )
    );


def parse_timecode_range( line: str ) -> Tuple[timedelta, timedelta]:
    """
    Parse a boundary line into start and end offsets.

    Args:
        line: Raw line containing the `" --> "` separator

    Returns:
        Tuple of (start, end) timedeltas measured from ZERO_TIME

    Raises:
        MalformedTimecode: If the line does not hold two h:m:s,ms fields
    """
    match = _TIMECODE_RANGE.match( line );
    if match is None:
        cause = ValueError( "expected 'h:m:s,ms --> h:m:s,ms'" );
        raise MalformedTimecode( line, cause ) from cause;

    fields = match.groups();
    start = _to_timedelta( *fields[:4] );
    end = _to_timedelta( *fields[4:] );

    return start, end;


def format_timecode( value: timedelta ) -> str:
    """Render a single offset as HH:MM:SS,mmm (hours are not wrapped at 24)."""
    sign = "";
    if value < ZERO_TIME:
        sign = "-";
        value = -value;

    total_millis = value // ONE_MILLISECOND;
    hours = total_millis // 3_600_000;
    minutes = ( total_millis // 60_000 ) % 60;
    seconds = ( total_millis // 1000 ) % 60;
    millis = total_millis % 1000;

    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}";


def format_timecode_range( start: timedelta, end: timedelta ) -> str:
    """
    Render a start/end pair as `HH:MM:SS,mmm --> HH:MM:SS,mmm`.

    A start before the zero epoch is clamped to ZERO_TIME.
    """
    if start < ZERO_TIME:
        start = ZERO_TIME;

    return f"{format_timecode( start )}{TIME_SEPARATOR}{format_timecode( end )}";

