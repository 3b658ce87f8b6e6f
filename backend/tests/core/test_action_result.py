"""Action Result Protocol: verifies the uniform {status, message, error?} shape.

Tests cover:
    - success() defaults to 200 and omits error
    - from_error() copies status, message and field errors from CatalogError
    - Every taxonomy member maps to its documented status code
"""

from uuid import uuid4

from app.core.action_result import ActionResult, STATUS_CREATED
from app.core.domain_types import ResourceType
from app.core.errors import (
    DuplicateNameError, NotFoundError, ResourceInUseError, UnexpectedError,
    ValidationError,
)


def test_success_defaults_to_200_without_error():
    result = ActionResult.success("Category updated successfully.")
    assert result.to_dict() == {
        "status": 200, "message": "Category updated successfully.",
    }
    assert result.ok


def test_success_created():
    result = ActionResult.success("Category added successfully.", STATUS_CREATED)
    assert result.status == 201
    assert "error" not in result.to_dict()


def test_validation_error_maps_to_400_with_fields():
    result = ActionResult.from_error(
        ValidationError({"categoryName": "Category name is required."}),
    )
    assert result.to_dict() == {
        "status": 400,
        "message": "Invalid input data.",
        "error": {"categoryName": "Category name is required."},
    }
    assert not result.ok


def test_duplicate_name_maps_to_409_with_offending_name():
    result = ActionResult.from_error(
        DuplicateNameError(ResourceType.CATEGORY, "drinks", "categoryName"),
    )
    assert result.status == 409
    assert result.message == "Category already exists."
    assert result.error == {"categoryName": 'Category "drinks" already exists.'}


def test_not_found_maps_to_404():
    result = ActionResult.from_error(
        NotFoundError(ResourceType.PRODUCT, str(uuid4())),
    )
    assert result.status == 404
    assert result.message == "Product not found."
    assert result.error == {"id": "The specified product does not exist."}


def test_resource_in_use_maps_to_409():
    result = ActionResult.from_error(
        ResourceInUseError(ResourceType.CATEGORY, str(uuid4())),
    )
    assert result.status == 409
    assert "id" in result.error


def test_unexpected_maps_to_500_without_internal_details():
    result = ActionResult.from_error(UnexpectedError("addCategory"))
    assert result.status == 500
    assert result.message == "An unexpected error occurred."
    assert set(result.error) == {"general"}


def test_from_error_copies_field_errors():
    exc = ValidationError({"name": "Product name is required"})
    result = ActionResult.from_error(exc)
    result.error["name"] = "changed"
    assert exc.field_errors["name"] == "Product name is required"
