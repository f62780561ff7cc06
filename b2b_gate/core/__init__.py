"""Core Layer: activation policy, category and customer-group resolution.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or schemas/
    - Collaborators are injected through the Protocols in repository_protocols.py
    - Functions are synchronous and hold no state between calls
"""
