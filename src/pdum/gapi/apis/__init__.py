"""Clients generated from Discovery documents and shipped with pdum_gapi.

Regenerate with::

    pdum_gapi generate homegraph:v1 apikeys:v2 doubleclickbidmanager:v2 --out src/pdum/gapi/apis
"""
