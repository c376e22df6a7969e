"""Data models for Terraform plan documents and change categories."""

from .category import ChangeAction, ChangeCategory, ChangeSymbol, OutputCategory, OutputSymbol
from .plan import OutputChange, PlanDocument, ResourceChange

__all__ = [
    "ChangeAction",
    "ChangeCategory",
    "ChangeSymbol",
    "OutputCategory",
    "OutputChange",
    "OutputSymbol",
    "PlanDocument",
    "ResourceChange",
]
