"""
SRT document parser.

Lines are read in a single forward pass. Every line that is not a boundary
(timecode range) line is collected into the text buffer of the block under
construction. When the next boundary shows up, the buffer already holds the
next block's index line and the blank separator before it, so both are
stripped before the buffer is attached to its block.
"""
from typing import Iterable, List, Optional

from .config import DEFAULT_FALLBACK_ENCODING, Settings
from .decoding import decode_subtitle_bytes, iter_lines
from .errors import MalformedTimecode
from .logging import get_logger
from .subtitles import Subtitle, SubtitleDocument
from .timecode import TIME_SEPARATOR, parse_timecode_range


class SrtParser:
    """
    Line-classification state machine for SRT text.

    States:
    - seeking_boundary: before the first boundary line; collected lines
      belong to a placeholder that is never added to the document
    - collecting_text: a block has been opened and receives non-boundary lines
    """

    SEEKING_BOUNDARY = "seeking_boundary";
    COLLECTING_TEXT = "collecting_text";

    def __init__( self, finalize_last_block: bool = True, fallback_encoding: str = DEFAULT_FALLBACK_ENCODING ):
        self.logger = get_logger();
        self.finalize_last_block = finalize_last_block;
        self.fallback_encoding = fallback_encoding;

    @classmethod
    def from_settings( cls, settings: Settings ) -> "SrtParser":
        return cls(
            finalize_last_block=settings.finalize_last_block,
            fallback_encoding=settings.fallback_encoding
        );

    @staticmethod
    def strip_terminator( line: str ) -> str:
        """Remove one "\\n" and then one "\\r" from the end of line."""
        if line.endswith( "\n" ):
            line = line[:-1];
        if line.endswith( "\r" ):
            line = line[:-1];
        return line;

    @staticmethod
    def is_boundary( line: str ) -> bool:
        return TIME_SEPARATOR in line;

    @staticmethod
    def _close_interior( buffer: List[str] ):
        """Drop the next block's index line, then the blank separator before it."""
        if buffer:
            buffer.pop();
        if buffer and buffer[-1] == "":
            buffer.pop();

    @staticmethod
    def _close_final( buffer: List[str] ):
        """Drop the blank separator trailing the last block."""
        if buffer and buffer[-1] == "":
            buffer.pop();

    def parse_lines( self, lines: Iterable[str] ) -> SubtitleDocument:
        """
        Parse SRT lines into a SubtitleDocument.

        Args:
            lines: Decoded text lines; one trailing "\\n" or "\\r\\n" is ignored

        Returns:
            SubtitleDocument with one Subtitle per boundary line

        Raises:
            MalformedTimecode: If a boundary line cannot be parsed
        """
        document = SubtitleDocument();
        state = self.SEEKING_BOUNDARY;
        pending: Optional[Subtitle] = None;
        buffer: List[str] = [];

        for line_number, raw_line in enumerate( lines, 1 ):
            line = self.strip_terminator( raw_line );

            if not self.is_boundary( line ):
                buffer.append( line );
                continue;

            self._close_interior( buffer );
            if state == self.COLLECTING_TEXT:
                pending.text = buffer;

            try:
                start, end = parse_timecode_range( line );
            except MalformedTimecode:
                self.logger.error( f"Malformed timecode on line {line_number}: {line!r}" );
                raise;

            pending = Subtitle( start, end );
            document.append( pending );
            buffer = [];
            state = self.COLLECTING_TEXT;

        if state == self.COLLECTING_TEXT:
            if self.finalize_last_block:
                self._close_final( buffer );
            pending.text = buffer;

        self.logger.debug( f"Parsed {len( document )} subtitle entries" );
        return document;

    def parse_text( self, text: str ) -> SubtitleDocument:
        """Parse already decoded SRT text."""
        return self.parse_lines( iter_lines( text ) );

    def parse_bytes( self, data: bytes, fallback_encoding: Optional[str] = None ) -> SubtitleDocument:
        """
        Decode raw SRT bytes (UTF-8 or the fallback code page) and parse them.

        The parser's own fallback_encoding is used unless one is given.
        """
        encoding = fallback_encoding or self.fallback_encoding;
        return self.parse_text( decode_subtitle_bytes( data, encoding ) );


def parse_lines( lines: Iterable[str], finalize_last_block: bool = True ) -> SubtitleDocument:
    """Parse SRT lines with a default parser."""
    return SrtParser( finalize_last_block=finalize_last_block ).parse_lines( lines );


def parse_text( text: str, finalize_last_block: bool = True ) -> SubtitleDocument:
    """Parse SRT text with a default parser."""
    return SrtParser( finalize_last_block=finalize_last_block ).parse_text( text );
