"""
SRT serializer: renders a SubtitleDocument back to text.
"""
from typing import TextIO

from .errors import EmptyDocument
from .logging import get_logger
from .subtitles import SubtitleDocument
from .timecode import format_timecode_range


NEW_LINE = "\n";


class SrtWriter:
    """Writes documents in document order with regenerated 1-based indexes."""

    def __init__( self, new_line: str = NEW_LINE ):
        self.logger = get_logger();
        self.new_line = new_line;

    def render( self, document: SubtitleDocument ) -> str:
        """
        Render a document as SRT text.

        Args:
            document: Document to render

        Returns:
            Complete SRT text

        Raises:
            EmptyDocument: If the document holds no subtitles
        """
        if document.is_empty():
            raise EmptyDocument();

        parts = [];
        for index, sub in enumerate( document, 1 ):
            parts.append( f"{index}{self.new_line}" );
            parts.append( format_timecode_range( sub.start, sub.end ) + self.new_line );
            for line in sub.text:
                parts.append( line + self.new_line );
            parts.append( self.new_line );

        return "".join( parts );

    def write( self, document: SubtitleDocument, sink: TextIO ):
        """
        Render the whole document, then write it to sink in one call.

        Nothing is written when rendering fails; errors raised by the sink
        propagate unchanged.
        """
        output = self.render( document );
        sink.write( output );
        self.logger.debug( f"Wrote {len( document )} subtitle entries" );


def render( document: SubtitleDocument ) -> str:
    """Render a document with the default writer."""
    return SrtWriter().render( document );


def write( document: SubtitleDocument, sink: TextIO ):
    """Write a document to sink with the default writer."""
    SrtWriter().write( document, sink );
