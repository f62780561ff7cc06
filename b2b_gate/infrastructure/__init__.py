"""Infrastructure Layer: logging setup and snapshot-backed collaborators.

Invariants:
    - Implements the Protocols declared in core/repository_protocols.py
    - Never contains activation rules
"""
