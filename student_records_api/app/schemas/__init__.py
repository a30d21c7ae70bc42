"""
Pydantic schema definitions for API payloads.

``student`` defines the record and its request and response shapes;
``fields`` declares the field catalog the merge engine and the
completeness validator iterate over.
"""
