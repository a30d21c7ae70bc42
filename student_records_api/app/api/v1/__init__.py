"""
Version 1 of the API.

This subpackage bundles the endpoints of the first public version of
the Student Records API.  Breaking changes should be introduced in a
new version subpackage (e.g. ``v2``) to preserve backwards
compatibility.
"""
