#!/usr/bin/env python3
"""Example script generating a client module from the live directory.

This script shows how to resolve a friendly API name, download its
Discovery document and write the generated module.

Usage:
    python example_generate.py "Tag Manager" build
"""

import sys
from pathlib import Path

from pdum.gapi import compile_module, fetch_rest_description, lookup_api


def main():
    """Generate one client module."""
    query = sys.argv[1] if len(sys.argv) > 1 else "HomeGraph"
    output = Path(sys.argv[2] if len(sys.argv) > 2 else "build")

    item = lookup_api(query)
    print(f"Resolved '{query}' to {item.id} ({item.title})")

    module = compile_module(fetch_rest_description(item))
    path = module.write(output)
    print(f"✓ Wrote {path} ({len(module.source.splitlines())} lines)")


if __name__ == "__main__":
    main()
