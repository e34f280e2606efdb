"""Static HTML forms for registering and searching inventory items."""

_STYLE = """
    <style>
        body { font-family: system-ui, sans-serif; max-width: 480px; margin: 2rem auto; padding: 0 1rem; }
        label { display: block; margin-top: 1rem; }
        input[type=text], textarea { width: 100%; padding: 0.4rem; }
        button { margin-top: 1.25rem; padding: 0.5rem 1.25rem; }
    </style>"""


def _page(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>{_STYLE}
</head>
<body>
{body}
</body>
</html>
"""


def render_register_form() -> str:
    """Return HTML for /RegisterForm.html (multipart POST to /register)."""
    return _page(
        "Register inventory item",
        """    <h1>Register inventory item</h1>
    <form action="/register" method="post" enctype="multipart/form-data">
        <label for="inventory_name">Name</label>
        <input type="text" id="inventory_name" name="inventory_name" required>
        <label for="description">Description</label>
        <textarea id="description" name="description" rows="3"></textarea>
        <label for="photo">Photo</label>
        <input type="file" id="photo" name="photo" accept="image/*">
        <button type="submit">Register</button>
    </form>""",
    )


def render_search_form() -> str:
    """Return HTML for /SearchForm.html (urlencoded POST to /search)."""
    return _page(
        "Search inventory item",
        """    <h1>Search inventory item</h1>
    <form action="/search" method="post">
        <label for="id">Item ID</label>
        <input type="text" id="id" name="id" required>
        <label><input type="checkbox" name="has_photo"> Show photo</label>
        <button type="submit">Search</button>
    </form>""",
    )
