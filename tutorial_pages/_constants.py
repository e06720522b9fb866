"""Common literal values used across tutorial_pages.

These constants keep route prefixes, output filenames, and the fixed
not-found copy centralized so the static builder, the HTTP server, and tests
import the same values without drifting. Intended for internal use within the
tutorial_pages package.

Examples
--------
>>> from tutorial_pages import _constants
>>> _constants.TUTORIAL_ROUTE.format(href="getting-started")
'/tutorial/getting-started'
"""

LAYOUT_TEMPLATE = "layout.jinja"
TUTORIAL_ROUTE = "/tutorial/{href}"
NOT_FOUND_ROUTE = "/404"

INDEX_FILENAME = "index.html"
NOT_FOUND_FILENAME = "404.html"
STATIC_DIRNAME = "static"
TUTORIAL_DIRNAME = "tutorial"

NOT_FOUND_TITLE = "Page Not Found"
NOT_FOUND_DESCRIPTION = "The server cannot find the requested resource"

CONTENT_ERROR_TITLE = "Content Unavailable"
CONTENT_ERROR_DESCRIPTION = "The site content could not be loaded"

DEFAULT_CATEGORY = "Uncategorized"
