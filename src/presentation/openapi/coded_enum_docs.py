"""OpenAPI post-processing for coded enum fields.

Pydantic renders every CodedEnum field as

    {"type": "integer", "enum": [102, 103, ...], "x-coded-enum": "CourseType"}

but it cannot see the field-level description ("Course type"), which FastAPI
places next to it. This module walks the finished OpenAPI document and, for
each parameter and component property typed as a coded enum (directly, as an
Optional, or as array items):

    - appends " (102:PICTURE; 103:AUDIO; ...)" to the description, or sets
      it when the field has none;
    - rewrites `enum` from the registry's allow-list.

Exports:
    apply_coded_enum_docs: Annotate an OpenAPI document in place
    install_coded_enum_openapi: Replace app.openapi with an annotating version
"""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from src.core.container import get_logger
from src.domain.coded_enums import (
    CODED_ENUM_SCHEMA_MARKER,
    allowed_codes,
    describe,
    get_coded_enum_type_by_name,
)

_COMPOSITE_KEYS = ("anyOf", "oneOf", "allOf")


def _find_marked_schema(schema: dict[str, Any]) -> dict[str, Any] | None:
    """Return the sub-schema carrying the coded enum marker, if any.

    Descends through anyOf/oneOf/allOf options and array items, so
    `list[CourseType] | None` is found as well as `CourseType | None`.
    """
    if CODED_ENUM_SCHEMA_MARKER in schema:
        return schema

    for key in _COMPOSITE_KEYS:
        for option in schema.get(key, []):
            if isinstance(option, dict):
                found = _find_marked_schema(option)
                if found is not None:
                    return found

    items = schema.get("items")
    if isinstance(items, dict):
        return _find_marked_schema(items)

    return None


def _annotate(target: dict[str, Any], schema: dict[str, Any]) -> bool:
    """Annotate `target` if `schema` describes a coded enum.

    Args:
        target: Object owning the description (parameter or property).
        schema: Schema of that parameter or property.

    Returns:
        True if an annotation was applied.
    """
    marked = _find_marked_schema(schema)
    if marked is None:
        return False

    name = marked[CODED_ENUM_SCHEMA_MARKER]
    entry = get_coded_enum_type_by_name(name)
    if entry is None:
        get_logger().warning("OpenAPI references unregistered coded enum", enum_type=name)
        return False

    display = describe(entry)
    existing = target.get("description")
    target["description"] = f"{existing} ({display})" if existing else display
    marked["enum"] = [int(code) for code in allowed_codes(entry)]
    return True


def apply_coded_enum_docs(openapi_schema: dict[str, Any]) -> dict[str, Any]:
    """Annotate coded enum parameters and properties of an OpenAPI document.

    Mutates and returns `openapi_schema`. Not idempotent: descriptions are
    appended to, so apply it once per generated document.

    Args:
        openapi_schema: Document produced by fastapi.openapi.utils.get_openapi.

    Returns:
        The same document, annotated.

    Example:
        >>> doc = apply_coded_enum_docs(get_openapi(title="t", version="1", routes=app.routes))
        >>> doc["paths"]["/api/v1/courses/echo"]["get"]["parameters"][0]["description"]
        'Course type (102:PICTURE; 103:AUDIO; 104:VIDEO; 105:URL)'
    """
    annotated = 0

    for path_item in openapi_schema.get("paths", {}).values():
        for operation in path_item.values():
            if not isinstance(operation, dict):
                continue
            for parameter in operation.get("parameters", []):
                if _annotate(parameter, parameter.get("schema", {})):
                    annotated += 1

    for component in openapi_schema.get("components", {}).get("schemas", {}).values():
        for prop in component.get("properties", {}).values():
            if _annotate(prop, prop):
                annotated += 1

    get_logger().debug("Coded enum OpenAPI annotations applied", annotated=annotated)
    return openapi_schema


def install_coded_enum_openapi(app: FastAPI) -> None:
    """Make `app.openapi()` return an annotated, cached document.

    Args:
        app: FastAPI application instance.

    Example:
        >>> app = FastAPI()
        >>> install_coded_enum_openapi(app)
        >>> app.openapi()  # generated once, annotated, cached
    """

    def openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title=app.title,
            version=app.version,
            openapi_version=app.openapi_version,
            summary=app.summary,
            description=app.description,
            routes=app.routes,
            tags=app.openapi_tags,
            servers=app.servers,
            separate_input_output_schemas=app.separate_input_output_schemas,
        )
        app.openapi_schema = apply_coded_enum_docs(openapi_schema)
        return app.openapi_schema

    app.openapi = openapi  # type: ignore[method-assign]
