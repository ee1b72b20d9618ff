"""Scenario transforms: raw summary records -> template display models."""

from .common import extract_tagged, ratio_to_percent, shrink_identifier
from .registry import TRANSFORMS, Transform, default_transform, is_registered, resolve

__all__ = [
    "TRANSFORMS",
    "Transform",
    "default_transform",
    "extract_tagged",
    "is_registered",
    "ratio_to_percent",
    "resolve",
    "shrink_identifier",
]
