"""Generate GroupData catalogs from WebIDL sources."""

__version__ = "0.4.0"

from .bucket import Bucket
from .classifier import ApiDescription, DeclarationClassifier, classify
from .pipeline import CatalogOptions, CatalogResult, GroupDataGenerator
from .render import GroupDataRenderer, RenderOptions, render
from .schema import CallbackPolicy, DeclarationNode, Diagnostic

__all__ = [
    "__version__",
    "ApiDescription",
    "Bucket",
    "CallbackPolicy",
    "CatalogOptions",
    "CatalogResult",
    "DeclarationClassifier",
    "DeclarationNode",
    "Diagnostic",
    "GroupDataGenerator",
    "GroupDataRenderer",
    "RenderOptions",
    "classify",
    "render",
]
