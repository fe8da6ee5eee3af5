"""HTML highlighting entry point.

Parses HTML, places every annotation on the body and serialises the result
with ``<span class="annotation">`` wrappers.  Annotations that cannot be
placed are skipped with a warning (see ``AnnotationBinder``).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from spananchor.anchoring.binder import AnnotationBinder
from spananchor.config import get_settings
from spananchor.tree.html import parse_html, to_html
from spananchor.tree.memory import MemoryTree

if TYPE_CHECKING:
    from collections.abc import Iterable

    from spananchor.config import Settings
    from spananchor.models import AnnotationRecord

logger = logging.getLogger(__name__)


def highlight_html(
    html: str,
    annotations: Iterable[AnnotationRecord],
    settings: Settings | None = None,
) -> str:
    """Return *html* with each annotation's span wrapped.

    Args:
        html: Document or fragment.  Offsets are measured over the text of
            its body, excluding script/style/noscript/template content.
        annotations: Records to place, in order.  Later annotations nest
            inside wrappers created by earlier ones.
        settings: Optional settings; defaults to ``get_settings()``.

    Returns:
        The body's inner HTML with wrappers inserted.  If *annotations* is
        empty, the re-serialised body is returned unchanged in content.
    """
    settings = settings if settings is not None else get_settings()
    root = parse_html(html)
    binder = AnnotationBinder(MemoryTree.from_config(settings.wrapper), root, settings)
    binder.init(annotations)
    return to_html(root)
