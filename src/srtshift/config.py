"""
Runtime settings loaded from a .env file and environment variables.
"""
import codecs
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv

from .logging import setup_logging


DEFAULT_FALLBACK_ENCODING = "windows-1256";

_TRUE_VALUES = ( "1", "true", "yes", "on" );
_FALSE_VALUES = ( "0", "false", "no", "off", "" );


@dataclass
class Settings:
    """Settings shared by the decoding, parsing and logging layers."""
    fallback_encoding: str = DEFAULT_FALLBACK_ENCODING;   # Code page for non UTF-8 input
    debug: bool = False;                                  # DEBUG level logging
    log_dir: Optional[Path] = None;                       # Rotating log file location
    finalize_last_block: bool = True;                     # Strip the final block's trailing blanks


def _parse_bool( name: str, value: Optional[str], default: bool, errors: List[str] ) -> bool:
    if value is None:
        return default;

    normalized = value.strip().lower();
    if normalized in _TRUE_VALUES:
        return True;
    if normalized in _FALSE_VALUES:
        return False;

    errors.append( f"{name} must be a boolean, got: {value!r}" );
    return default;


def load_settings( env_file: Optional[Path] = None ) -> Settings:
    """
    Load settings from the environment.

    A .env file (the given one, or ./.env) is loaded first without overriding
    variables that are already set.

    Args:
        env_file: Optional path to a dotenv file

    Returns:
        Settings instance

    Raises:
        ValueError: If one or more variables hold invalid values
    """
    env_path = Path( env_file ) if env_file else Path( ".env" );
    if env_path.exists():
        load_dotenv( env_path );

    errors = [];

    fallback_encoding = os.getenv( "SRTSHIFT_FALLBACK_ENCODING" ) or DEFAULT_FALLBACK_ENCODING;
    try:
        codecs.lookup( fallback_encoding );
    except LookupError:
        errors.append( f"Unknown fallback encoding: {fallback_encoding}" );

    debug = _parse_bool( "SRTSHIFT_DEBUG", os.getenv( "SRTSHIFT_DEBUG" ), False, errors );
    finalize_last_block = _parse_bool(
        "SRTSHIFT_FINALIZE_LAST_BLOCK",
        os.getenv( "SRTSHIFT_FINALIZE_LAST_BLOCK" ),
        True,
        errors
    );

    log_dir = os.getenv( "SRTSHIFT_LOG_DIR" );

    if errors:
        raise ValueError( "Configuration errors: " + "; ".join( errors ) );

    return Settings(
        fallback_encoding=fallback_encoding,
        debug=debug,
        log_dir=Path( log_dir ) if log_dir else None,
        finalize_last_block=finalize_last_block
    );


def configure( env_file: Optional[Path] = None ) -> Settings:
    """
    Load settings and set up logging from them.

    Args:
        env_file: Optional path to a dotenv file

    Returns:
        Loaded Settings, to be handed to e.g. SrtParser.from_settings
    """
    settings = load_settings( env_file );

    logger = setup_logging( debug=settings.debug, log_dir=settings.log_dir );
    logger.debug( f"Fallback encoding: {settings.fallback_encoding}" );
    logger.debug( f"Finalize last block: {settings.finalize_last_block}" );

    return settings;
