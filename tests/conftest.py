import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def backup_dir(tmp_path, settings):
    path = tmp_path / "backups"
    settings.NAVIGATION_BACKUP_DIR = path
    return path


@pytest.fixture
def make_menu(db):
    """Create a MenuItem with an English label derived from its slug."""
    from navigation.models import MenuItem

    def make(slug, parent=None, order=1, **kwargs):
        kwargs.setdefault("name", {"en": slug.replace("-", " ").title()})
        return MenuItem.objects.create(slug=slug, parent=parent, order=order, **kwargs)

    return make


@pytest.fixture
def menu_snapshot(db):
    """Callable: slug -> (parent slug, order, visible, sorted tag slugs) for every menu."""
    from navigation.models import MenuItem

    def snapshot():
        return {
            m.slug: (
                m.parent.slug if m.parent else None,
                m.order,
                m.visible,
                sorted(t.slug for t in m.media_tags.all()),
            )
            for m in MenuItem.objects.select_related("parent").prefetch_related("media_tags")
        }

    return snapshot
