"""Global logging and error handling utilities"""
import logging
import sys
import traceback

from PyQt5.QtWidgets import QApplication, QMessageBox

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_main_window = None

_logger = logging.getLogger('cmyk_studio')


def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window


def main_window():
    """Current parent for error popups (None if unset)"""
    return _main_window


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional popup in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)

    In RELEASE_MODE:
        - Logs the full traceback
        - Shows popup with user message or exception string
        - Then raises the exception
    """
    if DEBUG_MODE:
        raise e

    _logger.error(traceback.format_exc())

    message = user_message if user_message else str(e)
    if _main_window is not None and QApplication.instance() is not None:
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error(f"ERROR POPUP (no window): {title} - {message}")

    raise e
