"""Application-wide constants."""

# Marker header attached to responses handled by the redirect middleware
REDIRECT_HEADER = "X-z7country-redirect"

REDIRECT_MARKER = "true"
SAME_URL_MARKER = "same url"

# Cookie set by visitors who opted out of automatic redirection
DISABLE_COOKIE_NAME = "disable-language-redirect"

FALSY_FLAG_VALUES = ["", "0", "false", "no", "off"]
