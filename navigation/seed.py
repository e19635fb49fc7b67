# backend/navigation/seed.py
"""Initial navigation: six top-level menus, bilingual labels."""
import logging

from django.db import transaction

from media_library.models import MediaTag

from .models import MenuItem, MenuType

logger = logging.getLogger(__name__)

PRODUCT_SERIES = [
    ("glass-standoff", {"en": "Glass Standoff", "zh": "广告螺丝"}),
    ("glass-connected-fitting", {"en": "Glass Connected Fitting", "zh": "玻璃栏杆扶手连接件"}),
    ("glass-fence-spigot", {"en": "Glass Fence Spigot", "zh": "玻璃护栏支架底座"}),
    ("guardrail-glass-clip", {"en": "Guardrail Glass Clip", "zh": "护栏系列"}),
    ("bathroom-glass-clip", {"en": "Bathroom Glass Clip", "zh": "浴室系列"}),
    ("glass-hinge", {"en": "Glass Hinge", "zh": "浴室夹"}),
    ("sliding-door-kit", {"en": "Sliding Door Kit", "zh": "移门滑轮套装"}),
    ("bathroom-handle", {"en": "Bathroom Handle", "zh": "浴室&大门拉手"}),
    ("door-handle", {"en": "Door Handle", "zh": "大门拉手"}),
    ("hidden-hook", {"en": "Hidden Hook", "zh": "挂钩"}),
]

SERVICE_CHILDREN = [
    ("service-overview", {"en": "Service Overview", "zh": "服务概览"}, "LayoutDashboard", "/service/overview"),
    ("one-stop-shop", {"en": "One-Stop Shop", "zh": "一站式服务"}, "Package", "/service/one-stop"),
    ("oem-odm", {"en": "OEM/ODM", "zh": "OEM/ODM定制"}, "Settings", "/service/oem-odm"),
    ("faq", {"en": "FAQ", "zh": "常见问题"}, "HelpCircle", "/service/faq"),
    ("application", {"en": "Application", "zh": "应用案例"}, "Lightbulb", "/applications"),
]

ABOUT_CHILDREN = [
    ("our-story", {"en": "Our Story", "zh": "我们的故事"}, "BookOpen", "/about/story"),
    ("blog", {"en": "Blog", "zh": "博客"}, "FileText", "/blog"),
    ("support", {"en": "Support", "zh": "技术支持"}, "Headphones", "/support"),
    ("privacy-policy", {"en": "Privacy Policy", "zh": "隐私政策"}, "Shield", "/privacy-policy"),
    ("fraud-notice", {"en": "Fraud Notice", "zh": "防诈骗声明"}, "AlertTriangle", "/fraud-notice"),
]


def _top(slug, name, type_, order, link=""):
    return MenuItem.objects.create(
        slug=slug,
        name=name,
        type=type_,
        link=link,
        order=order,
        visible=True,
        is_system=True,
    )


def _series_children(parent, prefix, tags_by_slug):
    for i, (slug, name) in enumerate(PRODUCT_SERIES, start=1):
        child = MenuItem.objects.create(
            slug=f"{prefix}-{slug}",
            name=name,
            type=MenuType.STANDARD,  # display is controlled by the parent's type
            parent=parent,
            link=f"/{'products' if prefix == 'product' else prefix}/{slug}",
            order=i,
        )
        tag = tags_by_slug.get(slug)
        if tag is not None:
            child.media_tags.add(tag)


def _icon_children(parent, children):
    for i, (slug, name, icon, link) in enumerate(children, start=1):
        MenuItem.objects.create(
            slug=slug,
            name=name,
            type=MenuType.STANDARD,
            icon=icon,
            parent=parent,
            link=link,
            order=i,
        )


@transaction.atomic
def seed_navigation() -> int:
    """
    Create the initial menus unless any menu exists.
    Returns the number of menus created.
    """
    existing = MenuItem.objects.count()
    if existing:
        logger.info("%s navigation menus exist, skipping seed", existing)
        return 0

    tags_by_slug = {
        tag.slug: tag
        for tag in MediaTag.objects.filter(type=MediaTag.TYPE_PRODUCT_SERIES)
    }
    logger.info("Found %s product series tags", len(tags_by_slug))

    _top("home", {"en": "Home", "zh": "首页"}, MenuType.STANDARD, 1, "/")

    product = _top("product", {"en": "Product", "zh": "产品系列"}, MenuType.PRODUCT_CARDS, 2, "/products")
    _series_children(product, "product", tags_by_slug)

    shop = _top("shop", {"en": "Shop", "zh": "商城"}, MenuType.PRODUCT_CARDS, 3, "/shop")
    _series_children(shop, "shop", tags_by_slug)

    service = _top("service", {"en": "Service", "zh": "服务"}, MenuType.SUBMENU, 4)
    _icon_children(service, SERVICE_CHILDREN)

    about = _top("about-us", {"en": "About Us", "zh": "关于我们"}, MenuType.SUBMENU, 5)
    _icon_children(about, ABOUT_CHILDREN)

    _top("contact-us", {"en": "Contact Us", "zh": "联系我们"}, MenuType.STANDARD, 6, "/contact")

    created = MenuItem.objects.count()
    logger.info("Seeded %s navigation menus", created)
    return created
