"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 5
DEFAULT_PAGINATION_WINDOW = 5
DEFAULT_UPLOAD_DIR = "uploads"
DEFAULT_UPLOAD_URL_PREFIX = "/uploads"

EDIT_BUFFER_SESSION_KEY = "client_edit_buffer"
