"""headinglinks - anchor ids for HTML headings and editor-defined link lists.

Annotates every heading of an HTML document with a stable, unique id and
renders an ordered list of in-page links from labels an editor configured
separately, matching labels to headings by their normalized text.

Main features:
- Deterministic heading ids with -1, -2 collision suffixes
- Case and punctuation insensitive label matching
- [link_to_headings] directive expansion
- YAML configuration with environment variable overrides
"""

from headinglinks.config.loader import ConfigLoader
from headinglinks.lib.annotator import AnnotationResult, annotate
from headinglinks.lib.errors import ConfigError, HeadingLinksError, ValidationError
from headinglinks.lib.pipeline import DocumentResult, RenderContext, render_document
from headinglinks.lib.renderer import render_link_list, resolve_labels
from headinglinks.lib.slugify import slugify
from headinglinks.models.config import LinkListConfig
from headinglinks.models.heading import HeadingRecord, HeadingTable, LinkEntry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AnnotationResult",
    "ConfigError",
    "ConfigLoader",
    "DocumentResult",
    "HeadingLinksError",
    "HeadingRecord",
    "HeadingTable",
    "LinkEntry",
    "LinkListConfig",
    "RenderContext",
    "ValidationError",
    "annotate",
    "render_document",
    "render_link_list",
    "resolve_labels",
    "slugify",
]
