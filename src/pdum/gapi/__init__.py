"""Python clients for Google REST APIs, generated from Discovery documents"""

from pdum.gapi.base import GoogleAuth, auth, request
from pdum.gapi.directory import fetch_rest_description, list_apis, lookup_api, resolve_api
from pdum.gapi.generator import api_modules, compile_module, generate, index_html
from pdum.gapi.types import (
    APIResolutionError,
    CodeModule,
    DirectoryItem,
    GenerationError,
    GoogleApiError,
)

__version__ = "0.1.0-alpha"


__all__ = [
    "__version__",
    "api_modules",
    "auth",
    "compile_module",
    "fetch_rest_description",
    "generate",
    "index_html",
    "list_apis",
    "lookup_api",
    "request",
    "resolve_api",
    "APIResolutionError",
    "CodeModule",
    "DirectoryItem",
    "GenerationError",
    "GoogleApiError",
    "GoogleAuth",
]
