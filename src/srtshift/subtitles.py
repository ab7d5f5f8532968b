"""
Subtitle data model: timed text blocks and the ordered document holding them.
"""
from datetime import timedelta
from typing import Iterator, List, Optional

from .timecode import ZERO_TIME, format_timecode


class Subtitle:
    """Represents a single subtitle block with timing and text lines."""

    def __init__( self, start: timedelta, end: timedelta, text: Optional[List[str]] = None ):
        self.start = start;                               # Offset from ZERO_TIME
        self.end = end;                                   # Offset from ZERO_TIME
        self.text = list( text ) if text else [];         # Display order

    def shift( self, delta: timedelta ):
        """
        Shift the whole block by delta (e.g. -2/+2 seconds).

        The end always moves. The start only moves when the result stays
        after the zero epoch; otherwise it keeps its old value.
        """
        self.shift_start( delta );
        self.shift_end( delta );

    def shift_start( self, delta: timedelta ):
        """Shift only the start, skipping updates that would not stay after ZERO_TIME."""
        if self.start + delta > ZERO_TIME:
            self.start = self.start + delta;

    def shift_end( self, delta: timedelta ):
        """Shift only the end."""
        self.end = self.end + delta;

    def __eq__( self, other ):
        if not isinstance( other, Subtitle ):
            return NotImplemented;
        return ( self.start, self.end, self.text ) == ( other.start, other.end, other.text );

    def __repr__( self ):
        first_line = self.text[0] if self.text else "";
        return f"Subtitle(start={format_timecode( self.start )}, end={format_timecode( self.end )}, text='{first_line[:30]}')";


class SubtitleDocument:
    """
    Ordered collection of subtitle blocks.

    Order is display order and the source of the regenerated index numbers;
    blocks are not required to be sorted by start time. A document owns its
    blocks exclusively.
    """

    def __init__( self, subtitles: Optional[List[Subtitle]] = None ):
        self.subtitles: List[Subtitle] = list( subtitles ) if subtitles else [];

    def append( self, subtitle: Subtitle ):
        self.subtitles.append( subtitle );

    def is_empty( self ) -> bool:
        return not self.subtitles;

    @property
    def last( self ) -> Optional[Subtitle]:
        """Last block in storage order, or None for an empty document."""
        return self.subtitles[-1] if self.subtitles else None;

    @property
    def end_time( self ) -> timedelta:
        """End of the storage-order last block (ZERO_TIME when empty)."""
        return self.last.end if self.subtitles else ZERO_TIME;

    def is_sorted( self ) -> bool:
        """True if block start times never decrease in storage order."""
        return all(
            earlier.start <= later.start
            for earlier, later in zip( self.subtitles, self.subtitles[1:] )
        );

    def __len__( self ) -> int:
        return len( self.subtitles );

    def __iter__( self ) -> Iterator[Subtitle]:
        return iter( self.subtitles );

    def __getitem__( self, index: int ) -> Subtitle:
        return self.subtitles[index];

    def __repr__( self ):
        return f"SubtitleDocument({len( self.subtitles )} subtitles)";
