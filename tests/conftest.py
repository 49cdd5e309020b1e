"""
Shared fixtures for CMYK Portrait Studio tests.

Provides a sample part catalog, scene instances and observation helpers.
"""
import os
import pytest

# Qt widgets are created without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


# ── Sample part catalog ─────────────────────────────────────────────────

SAMPLE_PARTS = {
    'eyes': {
        'title': 'Eyes',
        'c': 'parts/eyes_c.png', 'm': 'parts/eyes_m.png',
        'y': 'parts/eyes_y.png', 'k': 'parts/eyes_k.png',
        'posX': 0, 'posY': -60, 'posRot': 0,
    },
    'ears': {
        'title': 'Ears',
        'c': 'parts/ears_c.png', 'k': 'parts/ears_k.png',
        'posX': 0, 'posY': -40,
    },
    'nose': {
        'title': 'Nose',
        'm': 'parts/nose_m.png',
        'posX': 0, 'posY': 10, 'posRot': 5,
    },
    'lips': {
        'title': 'Lips',
        'm': 'parts/lips_m.png', 'y': 'parts/lips_y.png',
        'posY': 90,
    },
    'arm_left': {
        'title': 'Left arm',
        'c': 'parts/arm_left_c.png', 'k': 'parts/arm_left_k.png',
        'posX': -180, 'posY': 200, 'posRot': -15,
    },
    'arm_right': {
        'title': 'Right arm',
        'c': 'parts/arm_right_c.png', 'k': 'parts/arm_right_k.png',
        'posX': 180, 'posY': 200, 'posRot': 15,
    },
}


@pytest.fixture
def sample_parts():
    """Catalog document as parsed from parts.json"""
    return {key: dict(value) for key, value in SAMPLE_PARTS.items()}


@pytest.fixture
def catalog(sample_parts):
    from cmyk_studio.services.part_catalog import PartCatalog
    return PartCatalog.from_dict(sample_parts)


@pytest.fixture
def scene(catalog):
    """Empty scene wired to the sample catalog"""
    from cmyk_studio.models.scene import Scene
    return Scene(catalog)


@pytest.fixture
def drop_part(scene, catalog):
    """Place a part the way a sidebar drop does: role + channel from the catalog"""
    from cmyk_studio.models.part import Channel, Role

    def _drop(role_name, channel_code='c'):
        part = catalog.get(Role(role_name))
        channel = Channel(channel_code)
        return scene.add_layer(part.role, channel, part.asset_for(channel), part.default_transform)

    return _drop
