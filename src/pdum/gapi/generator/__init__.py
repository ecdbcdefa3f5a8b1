"""Discovery document to Python client code generator."""

from __future__ import annotations

from .compile import api_modules, compile_module, generate, index_html
from .discovery import Method, Parameter, RestDescription
from .naming import method_name, module_name, primary_name, snake_case

__all__ = [
    "Method",
    "Parameter",
    "RestDescription",
    "api_modules",
    "compile_module",
    "generate",
    "index_html",
    "method_name",
    "module_name",
    "primary_name",
    "snake_case",
]
