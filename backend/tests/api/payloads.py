"""Form payloads shared by the API tests."""


def product_payload(category_id: str, **overrides) -> dict:
    data = {
        "name": "Portfolio Kit",
        "description": "Personal portfolio template",
        "categoryId": category_id,
        "gitHubLink": "https://github.com/acme/portfolio",
        "productTechs": ["Next.js", "TypeScript"],
        "productAddons": "FullStack",
    }
    data.update(overrides)
    return data


PNG_FILE = {"image": ("cover.png", b"\x89PNG\r\n\x1a\n" + b"1" * 64, "image/png")}
