"""
Time transformations applied in place to a SubtitleDocument.

All times are offsets from ZERO_TIME. Start times follow the clamp-by-skip
rule of Subtitle.shift_start: an update that would not leave the start after
the zero epoch is skipped, so a start never becomes negative.
"""
from datetime import timedelta

from .errors import EmptyTimeline
from .logging import get_logger
from .subtitles import Subtitle, SubtitleDocument


ONE_MICROSECOND = timedelta( microseconds=1 );


def _whole_millis( value: timedelta ) -> int:
    """Milliseconds in value, truncated toward zero."""
    micros = value // ONE_MICROSECOND;
    if micros < 0:
        return -( -micros // 1000 );
    return micros // 1000;


def in_window( sub: Subtitle, window_start: timedelta, window_end: timedelta ) -> bool:
    """True if sub starts strictly after window_start and ends strictly before window_end."""
    return sub.start > window_start and sub.end < window_end;


def shift_all( document: SubtitleDocument, delta: timedelta ):
    """Shift every subtitle by delta (e.g. move all subtitles +2 seconds)."""
    for sub in document:
        sub.shift( delta );

    get_logger().debug( f"Shifted {len( document )} subtitles by {delta}" );


def shift_part( document: SubtitleDocument, window_start: timedelta, window_end: timedelta, delta: timedelta ):
    """
    Shift the subtitles lying strictly inside (window_start, window_end).

    A subtitle touching either bound exactly is left alone.
    """
    shifted = 0;
    for sub in document:
        if in_window( sub, window_start, window_end ):
            sub.shift( delta );
            shifted += 1;

    get_logger().debug( f"Shifted {shifted}/{len( document )} subtitles by {delta}" );


def cut_part( document: SubtitleDocument, window_start: timedelta, window_end: timedelta ):
    """
    Remove the subtitles lying strictly inside (window_start, window_end).

    Every kept subtitle ending after window_end is shifted forward by the
    window width. Kept subtitles stay in their original order.
    """
    width = window_end - window_start;
    kept = [];
    moved = 0;

    for sub in document:
        if in_window( sub, window_start, window_end ):
            continue;
        if sub.end > window_end:
            sub.shift( width );
            moved += 1;
        kept.append( sub );

    removed = len( document ) - len( kept );
    document.subtitles = kept;

    get_logger().debug( f"Cut {removed} subtitles, shifted {moved} by {width}" );


def shift_sync( document: SubtitleDocument, change: timedelta ):
    """
    Spread a timeline change proportionally over the document.

    Given 20 seconds, the subtitle at zero moves by nothing, the last one
    ends 20 seconds later and everything in between moves relative to its
    position on the timeline. The timeline length is the end of the last
    subtitle in document order.

    Args:
        document: Document to adjust in place
        change: Net change of the timeline length

    Raises:
        EmptyTimeline: If the document is empty or the last subtitle ends
            at or before the zero epoch
    """
    logger = get_logger();

    if document.is_empty():
        raise EmptyTimeline( "cannot resync an empty document" );

    total_millis = _whole_millis( document.end_time );
    if total_millis <= 0:
        raise EmptyTimeline( f"last subtitle ends at {document.end_time}, nothing to resync against" );

    if not document.is_sorted():
        logger.warning( "Subtitles are not sorted by start time; resync is anchored on the last one in document order" );

    change_millis = _whole_millis( change );

    for sub in document:
        start_diff = float( _whole_millis( sub.start ) ) / float( total_millis ) * float( change_millis );
        end_diff = float( _whole_millis( sub.end ) ) / float( total_millis ) * float( change_millis );

        sub.shift_start( timedelta( milliseconds=int( start_diff ) ) );
        sub.shift_end( timedelta( milliseconds=int( end_diff ) ) );

    logger.debug( f"Resynced {len( document )} subtitles over {total_millis}ms by {change_millis}ms" );
