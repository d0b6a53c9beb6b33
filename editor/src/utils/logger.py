"""Global logging and error handling utilities"""
import logging
import sys
import traceback
from PyQt5.QtWidgets import QMessageBox

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_main_window = None
_logger = logging.getLogger('PostComposer')

def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window

def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle unexpected exceptions with optional popup in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)

    In RELEASE_MODE:
        - Shows popup with user message or exception string
        - Logs the full traceback
        - Then raises the exception
    """
    if DEBUG_MODE:
        # Dev mode: just raise to see full traceback
        raise e

    tb = traceback.format_exc()
    _logger.error("%s\n%s", user_message or str(e), tb)

    message = user_message if user_message else str(e)
    if _main_window:
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error("ERROR POPUP (no window): %s - %s", title, message)

    raise e

def loggerWarn(e: Exception, user_message: str = None, title: str = "Warning"):
    """Report a recoverable failure to the user without raising

    Used for failures the editing session survives (bad image, failed
    generation): the edit is simply not applied.

    Args:
        e: The exception that was caught
        user_message: User-friendly message to show (defaults to str(e))
        title: Title for the popup dialog

    Returns:
        The message that was reported
    """
    message = user_message if user_message else str(e)
    _logger.warning("%s: %s", message, e)

    if _main_window:
        QMessageBox.warning(_main_window, title, message)

    return message
