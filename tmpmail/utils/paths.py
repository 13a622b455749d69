"""Centralized path definitions for tmpmail.

Configuration and logs live under the user's home directory. The session
directory lives under the system temp directory so that the address and
the cached message are cleared on reboot.
"""

import tempfile
from pathlib import Path

# Base application directory
TMPMAIL_DIR = Path.home() / ".tmpmail"

# Subdirectories
LOGS_DIR = TMPMAIL_DIR / "logs"
SESSION_DIR = Path(tempfile.gettempdir()) / "tmpmail"

# Specific files
CONFIG_PATH = TMPMAIL_DIR / "config.json"
ADDRESS_FILENAME = "email_address"
DOCUMENT_FILENAME = "tmpmail.html"
