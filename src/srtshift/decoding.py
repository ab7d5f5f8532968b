"""
Text decoding for raw subtitle bytes.

Input is taken as UTF-8 when it is valid UTF-8; anything else is decoded
with a legacy single-byte code page (Windows-1256 unless configured).
"""
from typing import Iterator

from .config import DEFAULT_FALLBACK_ENCODING
from .logging import get_logger


UTF8_BOM = "\ufeff";


def decode_subtitle_bytes( data: bytes, fallback_encoding: str = DEFAULT_FALLBACK_ENCODING ) -> str:
    """
    Decode subtitle bytes to text.

    Args:
        data: Raw file contents
        fallback_encoding: Codec used when data is not valid UTF-8

    Returns:
        Decoded text without a leading byte-order mark

    Raises:
        UnicodeDecodeError: If the fallback codec cannot decode the data either
    """
    try:
        text = data.decode( "utf-8" );
    except UnicodeDecodeError:
        get_logger().debug( f"Input is not valid UTF-8, decoding as {fallback_encoding}" );
        text = data.decode( fallback_encoding );

    if text.startswith( UTF8_BOM ):
        text = text[len( UTF8_BOM ):];

    return text;


def iter_lines( text: str ) -> Iterator[str]:
    """
    Yield the lines of text without their terminators.

    Lines end at "\n"; a "\r" before it is dropped and a final terminator
    does not produce an extra empty line.
    """
    lines = text.split( "\n" );
    if lines and lines[-1] == "":
        lines.pop();

    for line in lines:
        yield line[:-1] if line.endswith( "\r" ) else line;
