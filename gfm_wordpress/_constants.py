"""Common literal values used across gfm_wordpress.

These constants keep CSS class names and markup labels centralized so the
heading hook, the assembler, and tests can import the same values without
drifting. Intended for internal use within the gfm_wordpress package.

Examples
--------
>>> from gfm_wordpress import _constants
>>> _constants.FIRST_SECTION_CLASS
'first-section'
>>> _constants.BASE_IMAGE_CLASSES
('alignnone', 'size-full')
"""

FIRST_SECTION_CLASS = "first-section"
HEADER_LINK_CLASS = "header-link"
TOC_TITLE = "Table of Contents"
TOC_LIST_CLASS = "table-of-contents"
TOC_SUBLIST_CLASS = "subheading"

BASE_IMAGE_CLASSES = ("alignnone", "size-full")
BORDER_CLASS = "border"
FIGURE_CLASS = "figure"
CAPTION_CLASS = "caption"

DEFAULT_THEME = "xcode"
DEFAULT_SITE_ORIGIN = "http://developer.ibm.com/clouddataservices"
DEFAULT_SITE_NUMBER = "47"
DEFAULT_UPLOADS_PATH = "/wp-content/uploads/sites"
DEFAULT_CSS_SCOPE = ".pn-copy"
DEFAULT_BORDER_COLOR = "#2d2e31"
