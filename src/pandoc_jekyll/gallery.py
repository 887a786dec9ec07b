"""Rendering of embedded gallery descriptors into slider markup."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, List

from .errors import GalleryRenderError
from .tree import is_array, is_object, is_scalar_string, set_index

LOG = logging.getLogger("pandoc_jekyll")

ASSET_PREFIX = "/assets/static/"
GALLERY_ROOT_KEY = "gallery"
GALLERY_NAME_KEY = "gallery-name"
GALLERY_ITEMS_KEY = "gallery-items"
GALLERY_FORMAT = "json"
HTML_FORMAT = "html"

GALLERY_OPEN_TEMPLATE = '<div class="{name}">'
GALLERY_ITEM_TEMPLATE = (
    "<div>\n"
    '    <a href="{prefix}{filename}" data-lightbox="{name}">\n'
    '        <img data-lazy="{prefix}{thumbnail}"/>\n'
    "    </a>\n"
    "</div>\n"
)
GALLERY_CLOSE = "</div>"
GALLERY_SCRIPT_TEMPLATE = (
    '<script type="text/javascript">\n'
    "    $(document).ready(function(){{\n"
    "        $('.{name}').slick({{\n"
    "            infinite: false,\n"
    "            lazyLoad: 'ondemand',\n"
    "            dots: true\n"
    "        }});\n"
    "    }});\n"
    "</script>\n"
)


@dataclass
class Gallery:
    name: str
    items: List[Any]


def parse_gallery(payload: Any) -> Gallery:
    if not is_scalar_string(payload):
        raise GalleryRenderError("Gallery payload is not a string")
    try:
        data = json.loads(payload)
    except (ValueError, RecursionError) as exc:
        raise GalleryRenderError(f"Gallery payload is not valid JSON: {exc}") from exc

    if is_object(data) and set(data) == {GALLERY_ROOT_KEY}:
        data = data[GALLERY_ROOT_KEY]
    if not is_object(data):
        raise GalleryRenderError("Gallery payload is not a JSON object")

    name = data.get(GALLERY_NAME_KEY)
    if not is_scalar_string(name):
        raise GalleryRenderError(f"Gallery payload has no string {GALLERY_NAME_KEY!r}")
    items = data.get(GALLERY_ITEMS_KEY)
    if not is_array(items):
        raise GalleryRenderError(f"Gallery payload has no array {GALLERY_ITEMS_KEY!r}")
    return Gallery(name=name, items=items)


def _render_item(item: Any, name: str) -> str:
    if not is_array(item):
        LOG.warning("Gallery item is not an array: %s", json.dumps(item, ensure_ascii=False))
        return ""
    if len(item) not in (1, 2):
        LOG.warning("Unexpected size of array with gallery item: %s", json.dumps(item, ensure_ascii=False))
        return ""
    if not all(is_scalar_string(entry) for entry in item):
        LOG.warning("Gallery item holds non-string entries: %s", json.dumps(item, ensure_ascii=False))
        return ""
    filename = item[0]
    thumbnail = item[-1]
    return GALLERY_ITEM_TEMPLATE.format(prefix=ASSET_PREFIX, filename=filename, name=name, thumbnail=thumbnail)


def render_gallery(gallery: Gallery) -> str:
    parts = [GALLERY_OPEN_TEMPLATE.format(name=gallery.name)]
    for item in gallery.items:
        parts.append(_render_item(item, gallery.name))
    parts.append(GALLERY_CLOSE)
    parts.append(GALLERY_SCRIPT_TEMPLATE.format(name=gallery.name))
    return "".join(parts)


def render(payload: Any) -> str:
    """Render a gallery JSON payload to HTML; raises ``GalleryRenderError``."""
    return render_gallery(parse_gallery(payload))


def transform_gallery_blocks(blocks: List[List[Any]]) -> int:
    """Rewrite each ``["json", payload]`` list to ``["html", markup]`` in place.

    Payloads that fail to render are left untouched. Returns the number of
    rewritten blocks.
    """
    transformed = 0
    for block in blocks:
        payload = block[1]
        try:
            markup = render(payload)
        except GalleryRenderError as exc:
            LOG.warning("Failed to transform gallery data (%s). Data: %s", exc, payload)
            continue
        set_index(block, 0, HTML_FORMAT)
        set_index(block, 1, markup)
        transformed += 1
    return transformed
