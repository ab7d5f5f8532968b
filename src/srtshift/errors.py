"""
Error types raised while reading, transforming and writing subtitle documents.
"""


class SrtShiftError( Exception ):
    """Base class for all SrtShift errors."""


class MalformedTimecode( SrtShiftError ):
    """A boundary line does not match `h:m:s,ms --> h:m:s,ms`."""

    def __init__( self, line: str, cause: Exception ):
        self.line = line;
        self.cause = cause;
        super().__init__( f"can't parse srt duration {line!r}: {cause}" );


class EmptyDocument( SrtShiftError ):
    """Serialization was requested for a document without subtitles."""

    def __init__( self, message: str = "no subtitles to write" ):
        super().__init__( message );


class EmptyTimeline( SrtShiftError ):
    """Proportional resync has no timeline to distribute the change over."""
