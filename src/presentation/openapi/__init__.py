"""OpenAPI document customization.

Exports:
    apply_coded_enum_docs: Annotate coded enum fields in an OpenAPI document
    install_coded_enum_openapi: Install the annotating generator on an app
"""

from src.presentation.openapi.coded_enum_docs import (
    apply_coded_enum_docs,
    install_coded_enum_openapi,
)

__all__ = [
    "apply_coded_enum_docs",
    "install_coded_enum_openapi",
]
