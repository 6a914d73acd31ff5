"""Shared constants for the qmpo scheme, dot-directory and desktop integration."""

QMPO_HOME_EXT = ".qmpo"  # user-level state/config directory suffix

SCHEME = "directory"
SCHEME_PREFIX = f"{SCHEME}://"

# Desktop integration identifiers
EXECUTABLE_NAME = "qmpo"
DESKTOP_FILE_NAME = "qmpo.desktop"
MIME_TYPE = f"x-scheme-handler/{SCHEME}"
APP_BUNDLE_NAME = "qmpo.app"
BUNDLE_ID = "com.github.qmpo"

# Logfile is truncated once it grows past this size
DEFAULT_MAX_LOG_SIZE = 1024 * 1024
