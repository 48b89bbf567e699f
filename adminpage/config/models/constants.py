"""
Default values for configuration models.
"""

FIELD_TYPES = ("text", "hidden", "textarea", "select", "checkbox")

DEFAULT_FIELD_TYPE = "text"
DEFAULT_CAPABILITY = "manage_options"
DEFAULT_LOCATION = "menu"
DEFAULT_LOCALE = "en_US"
DEFAULT_MULTISELECT_HEIGHT = "85px"

PAGE_LOCATIONS = (
    "menu",
    "submenu",
    "options",
    "theme",
    "management",
    "users",
    "dashboard",
    "posts",
    "media",
    "pages",
    "comments",
    "plugins",
)

LOCALE_ENV_VAR = "ADMINPAGE_LOCALE"
OPTIONS_FILE_ENV_VAR = "ADMINPAGE_OPTIONS_FILE"
