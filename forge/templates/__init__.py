"""Template descriptors and the on-disk template registry."""

from forge.templates.descriptor import (
    DESCRIPTOR_FILENAME,
    TemplateDescriptor,
    TemplateKind,
)
from forge.templates.registry import Registry

__all__ = [
    "DESCRIPTOR_FILENAME",
    "Registry",
    "TemplateDescriptor",
    "TemplateKind",
]
