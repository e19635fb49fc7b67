# backend/navigation/services.py
from media_library.models import random_media_with_all_tags

from .models import MenuItem
from .tree import MenuImage, MenuRecord, build_menu_tree


def card_image(menu: MenuItem) -> MenuImage | None:
    """Random active image matching all of the menu's media tags, if any."""
    tag_ids = [tag.id for tag in menu.media_tags.all()]
    media = random_media_with_all_tags(tag_ids)
    if media is None or not media.file:
        return None
    return MenuImage(url=media.url, filename=media.filename)


def to_record(menu: MenuItem) -> MenuRecord:
    return MenuRecord(
        id=menu.id,
        slug=menu.slug,
        name=menu.name,
        url=menu.link,
        type=menu.type,
        icon=menu.icon,
        inquiry_link=menu.inquiry_link,
        order=menu.order,
        visible=menu.visible,
        parent_id=menu.parent_id,
        image=card_image(menu) if menu.visible else None,
    )


def fetch_menu_records() -> list[MenuRecord]:
    """
    All menu rows as a flat list in fetch order.
    Hidden rows are included so that the tree can prune their subtrees.
    """
    menus = MenuItem.objects.prefetch_related("media_tags").order_by("order", "id")
    return [to_record(menu) for menu in menus]


def resolved_navigation(locale: str) -> list[dict]:
    return [item.to_dict() for item in build_menu_tree(fetch_menu_records(), locale)]
