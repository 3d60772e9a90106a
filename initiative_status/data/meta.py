"""
Parser for the metadata block embedded in a Linear project's `content` field.

Linear projects carry structured fields (url, cost estimate, Open Collective
details, routing hints) as `key: value` lines inside an HTML comment:

    <!-- meta
    url: https://puppet.inquiry.institute
    cost_estimate: 5000
    opencollective_slug: puppet-initiative
    opencollective_type: initiative
    subdomain: puppet
    page_path: /puppet
    -->

Parsing is lenient: lines that do not look like `key: value`, unknown keys and
unparseable numbers never raise, they only leave the affected field empty.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace
from typing import Optional, Tuple


META_BLOCK_REGEX = re.compile(r"<!--\s*meta\s*\n(.*?)-->", re.DOTALL)
META_LINE_REGEX = re.compile(r"\s*(\w+)\s*:\s*(.+?)\s*", re.ASCII)
MARKDOWN_LINK_REGEX = re.compile(r"\[([^\]]+)\]\(.+\)")

OPENCOLLECTIVE_TYPES = ("initiative", "collective")
TEXT_KEYS = ("url", "opencollective_slug", "subdomain", "page_path")


@dataclass(frozen=True)
class ProjectMeta:
    url: Optional[str] = None
    cost_estimate: Optional[float] = None
    opencollective_slug: Optional[str] = None
    opencollective_type: Optional[str] = None
    subdomain: Optional[str] = None
    page_path: Optional[str] = None


def strip_markdown_link(value: str) -> str:
    """Undo the `[url](<url>)` wrapping Linear's editor applies to bare URLs."""
    match = MARKDOWN_LINK_REGEX.fullmatch(value)
    if match:
        return match.group(1)
    return value


def _parse_cost(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        return 0
    if not math.isfinite(number) or number < 0:
        return 0
    return number


def parse_meta(content: Optional[str]) -> Tuple[ProjectMeta, str]:
    """Split `content` into the parsed metadata and the remaining body text.

    The body is the content with the whole `<!-- meta ... -->` span removed,
    stripped of surrounding whitespace. Without a block the meta is empty and
    the body is the stripped content.
    """
    if not content:
        return ProjectMeta(), ""

    block = META_BLOCK_REGEX.search(content)
    if block is None:
        return ProjectMeta(), content.strip()

    body = (content[: block.start()] + content[block.end():]).strip()

    meta = ProjectMeta()
    for line in block.group(1).split("\n"):
        match = META_LINE_REGEX.fullmatch(line)
        if not match:
            continue
        key, raw_value = match.groups()
        value = strip_markdown_link(raw_value.strip())
        if key in TEXT_KEYS:
            meta = replace(meta, **{key: value})
        elif key == "cost_estimate":
            meta = replace(meta, cost_estimate=_parse_cost(value))
        elif key == "opencollective_type":
            # Unknown collective types leave the field untouched
            if value in OPENCOLLECTIVE_TYPES:
                meta = replace(meta, opencollective_type=value)

    return meta, body
