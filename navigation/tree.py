# backend/navigation/tree.py
"""
Turns raw, multilingual menu records into the single-locale tree the
frontend renders.

Call sites hand over either a flat list (children linked through
``parent_id``) or records whose ``children`` are already populated; both
shapes produce the same output. Nothing here touches the database.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from content.localization import resolve_localized

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"


@dataclass(frozen=True)
class MenuImage:
    url: str
    filename: str


@dataclass
class MenuRecord:
    id: int | str
    slug: str
    name: dict | str | None
    url: str = ""
    type: str = "STANDARD"
    icon: str = ""
    inquiry_link: str = ""
    order: int = 0
    visible: bool = True
    parent_id: int | str | None = None
    image: Optional[MenuImage] = None
    children: list["MenuRecord"] = field(default_factory=list)


@dataclass
class ResolvedMenuItem:
    id: int | str
    label: str
    url: str
    type: str
    order: int
    icon: str = ""
    inquiry_link: str = ""
    image: Optional[MenuImage] = None
    children: list["ResolvedMenuItem"] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "label": self.label,
            "url": self.url,
            "type": self.type,
            "icon": self.icon or None,
            "openInNewTab": False,
            "order": self.order,
        }
        if self.inquiry_link:
            data["inquiryLink"] = self.inquiry_link
        if self.image is not None:
            data["image"] = {"url": self.image.url, "filename": self.image.filename}
        if self.children:
            data["childMenus"] = [child.to_dict() for child in self.children]
        return data


def sort_siblings(records: Iterable[MenuRecord]) -> list[MenuRecord]:
    # sorted() is stable, so equal orders keep fetch order
    return sorted(records, key=lambda r: r.order)


def _index_children(records: list[MenuRecord]) -> dict:
    """
    parent id -> children, merging flat links and pre-nested children.

    A child's own ``parent_id`` wins over the record it is nested in.
    """
    by_parent: dict = {}
    seen = set()

    def add(parent_id, child):
        bucket = by_parent.setdefault(parent_id, [])
        key = (parent_id, child.id)
        if key not in seen:
            seen.add(key)
            bucket.append(child)

    walked = set()

    def walk(record):
        if record.id in walked:
            return
        walked.add(record.id)
        for child in record.children:
            parent_id = record.id
            if child.parent_id is not None and child.parent_id != record.id:
                logger.warning(
                    "Menu %s is nested under %s but points to parent %s; using the parent id",
                    child.slug,
                    record.slug,
                    child.parent_id,
                )
                parent_id = child.parent_id
            add(parent_id, child)
            walk(child)

    for record in records:
        if record.parent_id is not None:
            add(record.parent_id, record)
        walk(record)

    return by_parent


def _resolve(record, locale, by_parent, path) -> ResolvedMenuItem:
    path = path | {record.id}
    children = []
    for child in sort_siblings(by_parent.get(record.id, [])):
        if not child.visible:
            continue
        if child.id in path:
            logger.warning(
                "Menu %s is its own ancestor (via %s); dropping the back-reference",
                child.slug,
                record.slug,
            )
            continue
        children.append(_resolve(child, locale, by_parent, path))

    return ResolvedMenuItem(
        id=record.id,
        label=resolve_localized(record.name, locale, UNTITLED),
        url=record.url or "",
        type=record.type,
        order=record.order,
        icon=record.icon or "",
        inquiry_link=record.inquiry_link or "",
        image=record.image,
        children=children,
    )


def build_menu_tree(records: Iterable[MenuRecord], locale: str) -> list[ResolvedMenuItem]:
    """
    Build the ordered top-level menu list for ``locale``.

    Top level means ``parent_id is None``. Hidden records are pruned
    together with their whole subtree at every level.
    """
    records = list(records)
    by_parent = _index_children(records)

    top_level = [r for r in records if r.parent_id is None and r.visible]
    return [
        _resolve(record, locale, by_parent, frozenset())
        for record in sort_siblings(top_level)
    ]


def count_nodes(items: Iterable[ResolvedMenuItem]) -> int:
    return sum(1 + count_nodes(item.children) for item in items)
