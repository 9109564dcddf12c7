"""Item Views: derive the public representation of an inventory item.

Invariants:
    - photoUrl is derived from the item id, never from the stored filename
    - Every user-controlled field is HTML-escaped before it enters markup
    - Photo markup only appears when requested AND the item has a photo
"""

from html import escape

from inventory_service.core.repository_protocols import ItemLike

SEARCH_FORM_PATH = "/SearchForm.html"


def photo_url(item: ItemLike) -> str | None:
    """Public photo URL for an item, or None when it has no photo."""
    if not item.photo_filename:
        return None
    return f"/inventory/{item.id}/photo"


def render_search_page(item: ItemLike, include_photo: bool) -> str:
    """Render the HTML search-result page for one item."""
    name = escape(item.inventory_name or "")
    description = escape(item.description or "")
    photo_block = ""

    url = photo_url(item)
    if include_photo and url:
        link = f'Photo link: <a href="{url}">{url}</a>'
        description = f"{description}<br>{link}" if description else link
        photo_block = (
            "<p>\n"
            f'    <img src="{url}" alt="photo of {name}" style="max-width:300px;">\n'
            "  </p>"
        )

    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '  <meta charset="utf-8">\n'
        "  <title>Search result</title>\n"
        "</head>\n"
        "<body>\n"
        "  <h1>Search result</h1>\n"
        f"  <p><strong>ID:</strong> {item.id}</p>\n"
        f"  <p><strong>Name:</strong> {name}</p>\n"
        f"  <p><strong>Description:</strong><br>{description}</p>\n"
        f"  {photo_block}\n"
        f'  <p><a href="{SEARCH_FORM_PATH}">Back to search</a></p>\n'
        "</body>\n"
        "</html>\n"
    )
