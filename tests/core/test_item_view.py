"""Item Views: DTO photo URL derivation and HTML search page rendering."""

from types import SimpleNamespace

from inventory_service.core.item_view import photo_url, render_search_page
from inventory_service.schemas.inventory import InventoryItemDTO


def _item(**overrides):
    fields = {
        "id": 7,
        "inventory_name": "Drill",
        "description": "Cordless",
        "photo_filename": None,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


def test_photo_url_is_none_without_photo():
    assert photo_url(_item()) is None


def test_photo_url_derived_from_id_not_filename():
    assert photo_url(_item(photo_filename="abc123.png")) == "/inventory/7/photo"


def test_dto_serializes_photo_url_alias_and_hides_filename():
    dto = InventoryItemDTO.from_item(_item(photo_filename="secret.jpg"))
    data = dto.model_dump(by_alias=True)
    assert data == {
        "id": 7,
        "inventory_name": "Drill",
        "description": "Cordless",
        "photoUrl": "/inventory/7/photo",
    }
    assert "secret" not in str(data)


def test_dto_defaults_missing_description_to_empty():
    dto = InventoryItemDTO.from_item(_item(description=None))
    assert dto.description == ""


def test_search_page_contains_item_fields():
    page = render_search_page(_item(), include_photo=False)
    assert "<strong>ID:</strong> 7" in page
    assert "<strong>Name:</strong> Drill" in page
    assert "Cordless" in page
    assert 'href="/SearchForm.html"' in page


def test_search_page_escapes_user_fields():
    page = render_search_page(
        _item(
            inventory_name="<script>alert(1)</script>",
            description='"><img src=x onerror=alert(2)>',
            photo_filename="p.jpg",
        ),
        include_photo=True,
    )
    assert "<script>" not in page
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in page
    assert "<img src=x" not in page
    assert 'alt="photo of &lt;script&gt;' in page


def test_search_page_photo_block_only_when_requested():
    page = render_search_page(_item(photo_filename="p.jpg"), include_photo=False)
    assert "<img" not in page
    assert "Photo link" not in page


def test_search_page_photo_block_only_when_photo_exists():
    page = render_search_page(_item(), include_photo=True)
    assert "<img" not in page


def test_search_page_includes_photo_link_and_image():
    page = render_search_page(_item(photo_filename="p.jpg"), include_photo=True)
    assert 'Photo link: <a href="/inventory/7/photo">/inventory/7/photo</a>' in page
    assert '<img src="/inventory/7/photo"' in page
    assert "Cordless<br>Photo link" in page


def test_search_page_photo_link_without_description_has_no_break():
    page = render_search_page(
        _item(description="", photo_filename="p.jpg"), include_photo=True,
    )
    assert "<br>Photo link: <a" in page  # only the label's own break
    assert "<br><br>" not in page
