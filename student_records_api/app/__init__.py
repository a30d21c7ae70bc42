"""
Application package initializer.

This package contains the entrypoint for the API and its submodules.
The code is organised in layers: ``schemas`` describes the student
record and its field catalog, ``services`` holds the merge engine,
the completeness validator and the update orchestrator,
``repositories`` provides the document stores and ``api`` exposes the
HTTP routes.  Versioning is handled by grouping routers under the
``api/<version>/`` hierarchy.

The ASGI application lives in ``main``; it is not imported here so
that importing a submodule does not build the application.
"""
