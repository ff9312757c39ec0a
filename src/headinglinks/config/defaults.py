"""Default configuration values for headinglinks."""

# Field data and presentation defaults
DEFAULT_REPEATER_FIELD_NAME = "link_to_headings"
DEFAULT_SUBFIELD_NAME = "blog_page_headings"
DEFAULT_LIST_TITLE = "Table of Contents"

# Every heading level is a candidate unless narrowed (e.g. [2, 3, 4, 5, 6])
DEFAULT_HEADING_LEVELS: list[int] = [1, 2, 3, 4, 5, 6]

# Markup
DEFAULT_DIRECTIVE_TAG = "link_to_headings"
DEFAULT_CONTAINER_CLASS = "link-to-headings-container"
DEFAULT_TITLE_CLASS = "link-to-headings-title"
DEFAULT_UNRESOLVED_CLASS = "link-to-headings-unresolved"
DEFAULT_UNRESOLVED_SUFFIX = " (Heading not found in content)"

# Config file discovery
CONFIG_FILE_NAMES: tuple[str, str] = ("headinglinks.yml", "headinglinks.yaml")

DEFAULT_LINK_LIST_CONFIG: dict[str, object] = {
    "repeater_field_name": DEFAULT_REPEATER_FIELD_NAME,
    "subfield_name": DEFAULT_SUBFIELD_NAME,
    "list_title": DEFAULT_LIST_TITLE,
    "heading_levels": DEFAULT_HEADING_LEVELS,
    "directive_tag": DEFAULT_DIRECTIVE_TAG,
    "container_class": DEFAULT_CONTAINER_CLASS,
    "title_class": DEFAULT_TITLE_CLASS,
    "unresolved_class": DEFAULT_UNRESOLVED_CLASS,
    "unresolved_suffix": DEFAULT_UNRESOLVED_SUFFIX,
}
