# backend/navigation/ordering.py
"""
Bulk re-ranking of menu siblings from explicit slug lists.

Each listed slug gets ``order = position`` (1-based) inside its group.
Unlisted menus are left alone, so running the same lists twice is a no-op.
"""
import logging
from dataclasses import dataclass, field

from django.db import DatabaseError

from .models import MenuItem

logger = logging.getLogger(__name__)

DEFAULT_TOP_LEVEL_ORDER = [
    "home",
    "product",
    "shop",
    "service",
    "about-us",
    "contact-us",
]

DEFAULT_CHILD_ORDER = {
    "product": [
        "product-glass-standoff",
        "product-glass-fence-spigot",
        "product-glass-connected-fitting",
        "product-guardrail-glass-clip",
        "product-bathroom-glass-clip",
        "product-glass-hinge",
        "product-door-handle",
        "product-bathroom-handle",
        "product-sliding-door-kit",
        "product-hidden-hook",
    ],
    "shop": [
        "shop-glass-standoff",
        "shop-glass-fence-spigot",
        "shop-glass-connected-fitting",
        "shop-guardrail-glass-clip",
        "shop-bathroom-glass-clip",
        "shop-glass-hinge",
        "shop-door-handle",
        "shop-bathroom-handle",
        "shop-sliding-door-kit",
        "shop-hidden-hook",
    ],
    "service": [
        "service-overview",
        "one-stop-shop",
        "oem-odm",
        "application",
        "faq",
    ],
    "about-us": [
        "our-story",
        "blog",
        "support",
        "fraud-notice",
        "privacy-policy",
    ],
}


@dataclass
class ReorderReport:
    updated: list = field(default_factory=list)
    missing: list = field(default_factory=list)
    failed: list = field(default_factory=list)
    missing_parents: list = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def _set_order(slug, parent, order) -> int:
    return MenuItem.objects.filter(slug=slug, parent=parent).update(order=order)


def _apply(report, parent, slug, order):
    parent_slug = parent.slug if parent is not None else None
    try:
        count = _set_order(slug, parent, order)
    except DatabaseError as exc:
        logger.exception("Failed to set order for %s", slug)
        report.failed.append((parent_slug, slug, str(exc)))
        return

    if count:
        report.updated.append((parent_slug, slug, order))
    else:
        logger.warning("Menu %s not found under %s", slug, parent_slug or "top level")
        report.missing.append((parent_slug, slug))


def reorder_siblings(top_level=None, children_by_parent=None) -> ReorderReport:
    """
    Rank ``top_level`` slugs among root menus and each list in
    ``children_by_parent`` among the children of the named parent.

    Missing menus and failing updates are recorded in the report;
    every other update is still attempted.
    """
    report = ReorderReport()

    for position, slug in enumerate(top_level or [], start=1):
        _apply(report, None, slug, position)

    for parent_slug, slugs in (children_by_parent or {}).items():
        parent = MenuItem.objects.filter(slug=parent_slug).first()
        if parent is None:
            logger.warning("Parent menu %s not found, skipping its children", parent_slug)
            report.missing_parents.append(parent_slug)
            continue

        for position, slug in enumerate(slugs, start=1):
            _apply(report, parent, slug, position)

    return report
