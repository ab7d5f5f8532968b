"""
SrtShift - SRT subtitle timing utility.

Parses SRT documents, shifts, cuts and proportionally resyncs their
subtitle timing, and writes them back out.
"""

__version__ = "0.1.0";
__author__ = "SrtShift Project";
__license__ = "MIT";

from .config import Settings, configure, load_settings
from .errors import EmptyDocument, EmptyTimeline, MalformedTimecode, SrtShiftError
from .parser import SrtParser, parse_lines, parse_text
from .shift import cut_part, shift_all, shift_part, shift_sync
from .subtitles import Subtitle, SubtitleDocument
from .timecode import ZERO_TIME, format_timecode_range, parse_timecode_range
from .writer import SrtWriter, render, write
