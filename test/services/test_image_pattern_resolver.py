import pytest
from project_images.clients.registry_naming import RegistryNaming
from project_images.services.image_pattern_resolver import ImagePatternResolver

INVENTORY = [
    "registry.example.com/myorg/orders:1",
    "registry.example.com/myorg/billing:1",
    "registry.example.com/myorg/orders:2",
    "registry.example.com/other/orders:1",
    "registry.example.com/myorg/orders:1",
]

@pytest.fixture
def resolver():
    return ImagePatternResolver(RegistryNaming(registry="registry.example.com", group="myorg"))

def test_resolve_pattern(resolver):
    assert resolver.resolve_pattern("orders") == "registry.example.com/myorg/orders"

@pytest.mark.parametrize("project_id", ["orders", "Orders", "a.b", "orders/sub", ""])
def test_resolve_pattern_is_plain_composition(resolver, project_id):
    assert resolver.resolve_pattern(project_id) == "registry.example.com/myorg" + "/" + project_id

def test_filter_images(resolver):
    result = resolver.filter_images(INVENTORY, "registry.example.com/myorg/orders")
    assert result == [
        "registry.example.com/myorg/orders:1",
        "registry.example.com/myorg/orders:2",
        "registry.example.com/myorg/orders:1",
    ]

def test_filter_images_keeps_only_project_images():
    images = ["registry.example.com/myorg/orders:1", "registry.example.com/myorg/billing:1"]
    assert ImagePatternResolver.filter_images(images, "registry.example.com/myorg/orders") == [
        "registry.example.com/myorg/orders:1"
    ]

def test_filter_images_is_case_sensitive():
    assert ImagePatternResolver.filter_images(["registry.example.com/myorg/Orders:1"], "registry.example.com/myorg/orders") == []

def test_filter_images_empty_inventory():
    assert ImagePatternResolver.filter_images([], "registry.example.com/myorg/orders") == []

def test_filter_images_no_match():
    assert ImagePatternResolver.filter_images(INVENTORY, "registry.example.com/myorg/payments") == []

def test_filter_images_is_idempotent():
    pattern = "registry.example.com/myorg/orders"
    first = ImagePatternResolver.filter_images(INVENTORY, pattern)
    second = ImagePatternResolver.filter_images(INVENTORY, pattern)
    assert first == second
    assert len(INVENTORY) == 5

def test_belongs_to(resolver):
    assert resolver.belongs_to("orders", "registry.example.com/myorg/orders:1")
    assert not resolver.belongs_to("orders", "registry.example.com/myorg/billing:1")
