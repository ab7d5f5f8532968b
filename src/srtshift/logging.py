"""
Logging system for SrtShift with Rich console output and optional file rotation.
"""
import logging
import shutil
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.logging import RichHandler


MAX_LOG_BYTES = 5 * 1024 * 1024;  # 5MB


class SrtShiftLogger:
    """
    Logger wrapper for SrtShift with Rich display and optional rotating log file.

    Features:
    - Rich console output on stderr
    - File logging with rotation when a log directory is given
    - 5MB size check on startup, rotates an oversized log file
    - INFO default, DEBUG when debug is enabled
    """

    def __init__( self, name: str = "srtshift", debug: bool = False, log_dir: Optional[Path] = None ):
        self.name = name;
        self.debug_mode = debug;
        self.console = Console( stderr=True );

        self.logs_dir = Path( log_dir ) if log_dir else None;
        self.log_file = None;
        if self.logs_dir is not None:
            self.logs_dir.mkdir( parents=True, exist_ok=True );
            self.log_file = self.logs_dir / f"{name}.log";
            self._check_and_rotate_on_startup();

        self.logger = self._setup_logger();

    def _check_and_rotate_on_startup( self ):
        """Move an existing log file aside if it grew past 5MB."""
        if self.log_file.exists() and self.log_file.stat().st_size > MAX_LOG_BYTES:
            timestamp = datetime.now().isoformat().replace( ":", "-" );
            backup_name = self.logs_dir / f"{self.name}.{timestamp}.log";
            shutil.move( str( self.log_file ), str( backup_name ) );

    def _setup_logger( self ):
        """Setup logger with Rich console and optional file handlers."""
        level = logging.DEBUG if self.debug_mode else logging.INFO;

        logger = logging.getLogger( self.name );
        logger.setLevel( level );
        logger.handlers.clear();

        console_handler = RichHandler(
            console=self.console,
            rich_tracebacks=True,
            show_time=True,
            show_path=self.debug_mode
        );
        console_handler.setLevel( level );
        console_handler.setFormatter( logging.Formatter( "%(message)s" ) );
        logger.addHandler( console_handler );

        if self.log_file is not None:
            file_handler = RotatingFileHandler(
                self.log_file,
                maxBytes=MAX_LOG_BYTES,
                backupCount=5,
                encoding="utf-8"
            );
            file_handler.setLevel( logging.DEBUG );
            file_handler.setFormatter( logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            ) );
            logger.addHandler( file_handler );

        return logger;

    def debug( self, message, **kwargs ):
        """Log debug message."""
        self.logger.debug( message, **kwargs );

    def info( self, message, **kwargs ):
        """Log info message."""
        self.logger.info( message, **kwargs );

    def warning( self, message, **kwargs ):
        """Log warning message."""
        self.logger.warning( message, **kwargs );

    def error( self, message, **kwargs ):
        """Log error message."""
        self.logger.error( message, **kwargs );


# Global logger instance
_logger = None;


def get_logger( debug: bool = False, log_dir: Optional[Path] = None ) -> SrtShiftLogger:
    """Get the global SrtShift logger instance."""
    global _logger;
    if _logger is None:
        _logger = SrtShiftLogger( debug=debug, log_dir=log_dir );
    return _logger;


def setup_logging( debug: bool = False, log_dir: Optional[Path] = None ) -> SrtShiftLogger:
    """
    (Re)configure logging for the application.

    Unlike get_logger, this always rebuilds the handlers so that settings
    loaded after the first log call take effect.
    """
    global _logger;
    _logger = SrtShiftLogger( debug=debug, log_dir=log_dir );
    return _logger;
