#!/usr/bin/env python3
"""Example script listing the API keys of a project.

This script shows how to use a generated client with Application Default
Credentials.

Usage:
    python example_list_keys.py my-project-id

Note: This requires the API Keys API to be enabled and appropriate permissions.
"""

import sys

from pdum.gapi.apis.apikeys_v2 import APIKeys
from pdum.gapi.base import GoogleAuth


def main():
    """List API keys, including recently deleted ones."""
    if len(sys.argv) != 2:
        print("Usage: python example_list_keys.py PROJECT_ID")
        sys.exit(2)

    keys = APIKeys(GoogleAuth().default())
    parent = f"projects/{sys.argv[1]}/locations/global"
    print(f"Fetching API keys of {parent}...\n")

    page_token = None
    while True:
        page = keys.projects_locations_keys_list(parent, page_token=page_token, show_deleted=True)
        for key in page.get("keys", []):
            created = key.get("createTime")
            print(f"  🔑 {key.get('displayName') or key['uid']}")
            print(f"     Name: {key['name']}")
            if created:
                print(f"     Created: {created:%Y-%m-%d %H:%M} UTC")
            if key.get("deleteTime"):
                print("     ⚠️  Deleted")
        page_token = page.get("nextPageToken")
        if not page_token:
            break


if __name__ == "__main__":
    main()
