"""
Test cases for the SRT document parser.
"""
import pytest
from datetime import timedelta
from pathlib import Path
import sys

# Add src directory to path for testing
sys.path.insert( 0, str( Path( __file__ ).parent.parent / "src" ) );

from srtshift.config import Settings
from srtshift.errors import MalformedTimecode
from srtshift.parser import SrtParser, parse_lines, parse_text


SAMPLE_SRT = (
    "1\n"
    "00:00:01,000 --> 00:00:02,000\n"
    "Hello world\n"
    "Second line\n"
    "\n"
    "2\n"
    "00:00:03,000 --> 00:00:05,500\n"
    "Goodbye\n"
    "\n"
);


class TestSrtParser:
    """Test cases for block reconstruction."""

    def test_parse_two_blocks( self ):
        document = parse_text( SAMPLE_SRT );

        assert len( document ) == 2;
        assert document[0].start == timedelta( seconds=1 );
        assert document[0].end == timedelta( seconds=2 );
        assert document[0].text == [ "Hello world", "Second line" ];
        assert document[1].start == timedelta( seconds=3 );
        assert document[1].end == timedelta( seconds=5, milliseconds=500 );
        assert document[1].text == [ "Goodbye" ];

    def test_index_values_are_not_validated( self ):
        text = SAMPLE_SRT.replace( "1\n", "7\n", 1 ).replace( "2\n", "99\n", 1 );
        document = parse_text( text );
        assert [ sub.text for sub in document ] == [ [ "Hello world", "Second line" ], [ "Goodbye" ] ];

    def test_blank_lines_inside_text_are_kept( self ):
        text = (
            "1\n00:00:01,000 --> 00:00:02,000\nA\n\nB\n\n"
            "2\n00:00:03,000 --> 00:00:04,000\nC\n\nD\n\n"
        );
        document = parse_text( text );
        assert document[0].text == [ "A", "", "B" ];
        assert document[1].text == [ "C", "", "D" ];

    def test_block_without_text( self ):
        text = "1\n00:00:01,000 --> 00:00:02,000\n\n2\n00:00:03,000 --> 00:00:04,000\nB\n";
        document = parse_text( text );
        assert document[0].text == [];
        assert document[1].text == [ "B" ];

    def test_consecutive_boundaries( self ):
        text = "1\n00:00:01,000 --> 00:00:02,000\n00:00:03,000 --> 00:00:04,000\nB\n";
        document = parse_text( text );
        assert len( document ) == 2;
        assert document[0].text == [];
        assert document[1].text == [ "B" ];

    def test_first_line_boundary_without_index( self ):
        document = parse_text( "00:00:01,000 --> 00:00:02,000\nA\n" );
        assert len( document ) == 1;
        assert document[0].text == [ "A" ];

    def test_lines_before_first_boundary_are_discarded( self ):
        document = parse_text( "garbage\nmore garbage\n1\n00:00:01,000 --> 00:00:02,000\nA\n" );
        assert len( document ) == 1;
        assert document[0].text == [ "A" ];

    def test_empty_input( self ):
        assert parse_text( "" ).is_empty();
        assert parse_lines( [ "no", "boundary", "here" ] ).is_empty();

    def test_crlf_lines( self ):
        lines = [
            "1\r\n",
            "00:00:01,000 --> 00:00:02,000\r\n",
            "Hello\r\n",
            "\r\n",
            "2\r\n",
            "00:00:03,000 --> 00:00:04,000\r\n",
            "Bye\r\n"
        ];
        document = parse_lines( lines );
        assert document[0].text == [ "Hello" ];
        assert document[1].text == [ "Bye" ];

    def test_only_one_line_terminator_is_removed( self ):
        lines = [
            "1\n",
            "00:00:01,000 --> 00:00:02,000\r\n",
            "Hello\r\r\n",
            "World\r\r",
            "\n",
            "2\n",
            "00:00:03,000 --> 00:00:04,000\n",
            "Bye\n"
        ];
        document = parse_lines( lines );
        assert document[0].text == [ "Hello\r", "World\r" ];
        assert document[1].text == [ "Bye" ];

    def test_malformed_timecode_aborts( self ):
        text = SAMPLE_SRT.replace( "00:00:03,000 --> 00:00:05,500", "00:00:03.000 --> 00:00:05,500" );
        with pytest.raises( MalformedTimecode ) as excinfo:
            parse_text( text );
        assert excinfo.value.line == "00:00:03.000 --> 00:00:05,500";


class TestFinalBlock:
    """Test cases for how the last block is closed."""

    def test_trailing_separator_is_stripped( self ):
        document = parse_text( SAMPLE_SRT );
        assert document[-1].text == [ "Goodbye" ];

    def test_only_one_trailing_blank_line_is_stripped( self ):
        """Blank lines beyond the separator belong to the text, as for interior blocks."""
        document = parse_text( SAMPLE_SRT + "\n" );
        assert document[-1].text == [ "Goodbye", "" ];

    def test_compatibility_mode_keeps_trailing_lines( self ):
        document = SrtParser( finalize_last_block=False ).parse_text( SAMPLE_SRT );
        assert document[0].text == [ "Hello world", "Second line" ];
        assert document[1].text == [ "Goodbye", "" ];

    def test_compatibility_mode_only_affects_last_block( self ):
        document = parse_text( SAMPLE_SRT + "\n", finalize_last_block=False );
        assert document[0].text == [ "Hello world", "Second line" ];
        assert document[1].text == [ "Goodbye", "", "" ];

    def test_from_settings( self ):
        parser = SrtParser.from_settings( Settings( finalize_last_block=False, fallback_encoding="latin-1" ) );
        assert parser.finalize_last_block is False;
        assert parser.fallback_encoding == "latin-1";


class TestParseBytes:
    """Test cases for parsing undecoded input."""

    def test_utf8_input( self ):
        data = "1\n00:00:01,000 --> 00:00:02,000\nGrüße\n".encode( "utf-8" );
        document = SrtParser().parse_bytes( data );
        assert document[0].text == [ "Grüße" ];

    def test_utf8_bom_input( self ):
        data = "1\n00:00:01,000 --> 00:00:02,000\nA\n".encode( "utf-8-sig" );
        document = SrtParser().parse_bytes( data );
        assert len( document ) == 1;
        assert document[0].text == [ "A" ];

    def test_legacy_code_page_input( self ):
        data = "1\r\n00:00:01,000 --> 00:00:02,000\r\nسلام\r\n".encode( "cp1256" );
        document = SrtParser().parse_bytes( data );
        assert document[0].text == [ "سلام" ];

    def test_custom_fallback_encoding( self ):
        data = "1\n00:00:01,000 --> 00:00:02,000\nçà\n".encode( "latin-1" );
        document = SrtParser().parse_bytes( data, fallback_encoding="latin-1" );
        assert document[0].text == [ "çà" ];

    def test_fallback_encoding_from_settings( self ):
        data = "1\n00:00:01,000 --> 00:00:02,000\nñß\n".encode( "latin-1" );
        parser = SrtParser.from_settings( Settings( fallback_encoding="latin-1" ) );
        document = parser.parse_bytes( data );
        assert document[0].text == [ "ñß" ];
