"""Product Form: verifies field rules for add/update product submissions.

Invariants:
    - One message per invalid field, keyed by the form field name
    - productAddons: 0 → "Exactly one addon is required", 2+ → "Only one addon is allowed"
    - image required on create only; type/size checked whenever present
    - productTechs/productAddons accept lists, JSON strings and bare names
"""

from uuid import uuid4

import pytest

from app.core.domain_types import ImageUpload, PackageOption
from app.schemas.product import MAX_IMAGE_SIZE, validate_product_form
from app.schemas.validation import Invalid, Validated

PNG = ImageUpload("shot.png", "image/png", b"\x89PNG\r\n\x1a\n" + b"0" * 64)


def make_form(**overrides):
    form = {
        "name": "Portfolio Starter",
        "description": "A responsive portfolio template",
        "categoryId": str(uuid4()),
        "liveDemoLink": "https://demo.example.com",
        "gitHubLink": "https://github.com/acme/portfolio",
        "productTechs": ["React", "Tailwind"],
        "productAddons": [{"name": "FullStack"}],
        "image": PNG,
    }
    form.update(overrides)
    return form


def errors_of(form, is_create=True):
    outcome = validate_product_form(form, is_create=is_create)
    assert isinstance(outcome, Invalid)
    return outcome.errors


def test_valid_form_produces_store_fields():
    outcome = validate_product_form(make_form(), is_create=True)
    assert isinstance(outcome, Validated)
    fields = outcome.data.to_fields()
    assert fields["name"] == "Portfolio Starter"
    assert fields["technologies"] == ["React", "Tailwind"]
    assert fields["addon"] == PackageOption.FULL_STACK.value
    assert outcome.data.image is PNG


def test_zero_addons_rejected():
    assert errors_of(make_form(productAddons=[])) == {
        "productAddons": "Exactly one addon is required",
    }


def test_missing_addons_rejected():
    form = make_form()
    del form["productAddons"]
    assert errors_of(form)["productAddons"] == "Exactly one addon is required"


def test_two_addons_rejected():
    form = make_form(productAddons=[{"name": "UI"}, {"name": "UX"}])
    assert errors_of(form) == {"productAddons": "Only one addon is allowed"}


def test_unknown_addon_rejected():
    form = make_form(productAddons=[{"name": "Mobile"}])
    assert errors_of(form)["productAddons"] == (
        "Addon must be a valid package option (FullStack, Backend, Frontend, UI, UX)"
    )


def test_addons_accept_json_string():
    outcome = validate_product_form(
        make_form(productAddons='[{"name": "Backend"}]'), is_create=True,
    )
    assert outcome.data.to_fields()["addon"] == "Backend"


def test_addons_accept_bare_name():
    outcome = validate_product_form(make_form(productAddons="UX"), is_create=True)
    assert outcome.data.to_fields()["addon"] == "UX"


def test_technologies_required():
    assert errors_of(make_form(productTechs=[])) == {
        "productTechs": "At least one technology is required",
    }


def test_blank_technology_name_rejected():
    form = make_form(productTechs=[{"name": "React"}, {"name": "   "}])
    assert errors_of(form) == {"productTechs": "Technology name is required"}


def test_several_blank_technologies_report_one_message():
    form = make_form(productTechs=[{"name": ""}, {"name": " "}])
    assert errors_of(form)["productTechs"] == "Technology name is required"


def test_name_and_description_required_after_sanitizing():
    form = make_form(name="<script>x()</script>", description="<p></p>")
    assert errors_of(form) == {
        "name": "Product name is required",
        "description": "Product description is required",
    }


def test_name_and_description_length_limits():
    form = make_form(name="n" * 101, description="d" * 1001)
    assert errors_of(form) == {
        "name": "Product name must be less than 100 characters",
        "description": "Description must be less than 1000 characters",
    }


@pytest.mark.parametrize("value", ["", "not-a-uuid", None, "123"])
def test_category_id_must_be_uuid(value):
    assert errors_of(make_form(categoryId=value))["categoryId"] == "Category is required"


def test_links_optional():
    outcome = validate_product_form(
        make_form(liveDemoLink="", gitHubLink=None), is_create=True,
    )
    assert isinstance(outcome, Validated)
    assert outcome.data.live_demo_link is None
    assert outcome.data.git_hub_link is None


def test_invalid_live_demo_link():
    assert errors_of(make_form(liveDemoLink="not a url")) == {
        "liveDemoLink": "Live demo link must be a valid URL",
    }


@pytest.mark.parametrize("link", [
    "https://gitlab.com/acme/portfolio",
    "https://github.com/acme",
    "github.com/acme/portfolio",
])
def test_git_hub_link_must_be_repository_url(link):
    assert errors_of(make_form(gitHubLink=link))["gitHubLink"].startswith(
        "GitHub link must be a valid GitHub repository URL",
    )


def test_git_hub_link_allows_subpath():
    outcome = validate_product_form(
        make_form(gitHubLink="https://www.github.com/acme/portfolio/tree/main"),
        is_create=True,
    )
    assert isinstance(outcome, Validated)


def test_image_required_on_create():
    form = make_form()
    del form["image"]
    assert errors_of(form) == {"image": "Product image is required"}


def test_empty_upload_counts_as_missing():
    form = make_form(image=ImageUpload("", "application/octet-stream", b""))
    assert errors_of(form) == {"image": "Product image is required"}
    outcome = validate_product_form(form, is_create=False)
    assert isinstance(outcome, Validated)
    assert outcome.data.image is None


def test_image_optional_on_update():
    form = make_form()
    del form["image"]
    assert isinstance(validate_product_form(form, is_create=False), Validated)


def test_image_type_checked_on_update():
    form = make_form(image=ImageUpload("doc.pdf", "application/pdf", b"%PDF"))
    assert errors_of(form, is_create=False)["image"].startswith("Image must be a valid file")


def test_image_size_limit():
    big = ImageUpload("big.png", "image/png", b"0" * (MAX_IMAGE_SIZE + 1))
    assert "image" in errors_of(make_form(image=big))


def test_image_must_be_upload():
    assert "image" in errors_of(make_form(image="shot.png"))


def test_collects_errors_for_every_invalid_field():
    errors = errors_of({})
    assert set(errors) == {
        "name", "description", "categoryId",
        "productTechs", "productAddons", "image",
    }


def test_technology_name_longer_than_column_rejected():
    assert errors_of(make_form(productTechs=["React", "T" * 101])) == {
        "productTechs": "Technology name must be less than 100 characters",
    }


def test_technology_name_at_limit_accepted():
    outcome = validate_product_form(make_form(productTechs=["T" * 100]), is_create=True)
    assert isinstance(outcome, Validated)


def test_live_demo_link_longer_than_column_rejected():
    link = "https://example.com/" + "a" * 2030
    assert errors_of(make_form(liveDemoLink=link)) == {
        "liveDemoLink": "Live demo link must be less than 2000 characters",
    }


def test_github_link_longer_than_column_rejected():
    link = "https://github.com/acme/portfolio/" + "a" * 2000
    assert errors_of(make_form(gitHubLink=link)) == {
        "gitHubLink": "GitHub link must be less than 2000 characters",
    }


def test_link_at_column_width_accepted():
    link = "https://example.com/" + "a" * (2000 - len("https://example.com/"))
    outcome = validate_product_form(make_form(liveDemoLink=link), is_create=True)
    assert isinstance(outcome, Validated)
    assert len(outcome.data.live_demo_link) == 2000


def test_non_http_link_scheme_rejected():
    assert errors_of(make_form(liveDemoLink="ftp://files.example.com/demo")) == {
        "liveDemoLink": "Live demo link must be a valid URL",
    }
