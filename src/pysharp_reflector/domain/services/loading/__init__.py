#!/usr/bin/env python3

"""Loading services for signature descriptions."""

from .signature_loader import SignatureLoader

__all__ = [
    "SignatureLoader",
]
