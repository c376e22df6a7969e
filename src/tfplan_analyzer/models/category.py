"""Enumerations describing plan verbs and the categories derived from them."""

from __future__ import annotations

from enum import Enum


class ChangeAction(str, Enum):
    """Verbs Terraform emits in a change's ``actions`` list."""

    NOOP = "no-op"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    FORGET = "forget"


class ChangeCategory(str, Enum):
    """Mutually exclusive categories a resource change is classified into."""

    CREATE = "create"
    UPDATE = "update"
    UPDATE_IMPORT = "update-import"
    DELETE = "delete"
    REPLACE = "replace"
    REPLACE_IMPORT = "replace-import"
    IMPORT_NO_CHANGE = "import-nochange"
    REMOVE_FORGET = "remove-forget"
    NOOP = "no-op"
    UNCLASSIFIED = "unclassified"

    @property
    def label(self) -> str:
        return self.value.upper()


class OutputCategory(str, Enum):
    """Categories for changes to root module outputs."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    NOOP = "no-op"

    @property
    def label(self) -> str:
        return self.value.upper()


class ChangeSymbol(str, Enum):
    """Markers used by the compact diff listing.

    ``SUPPRESSED`` records are left out of the listing entirely.
    """

    REPLACE_DELETE_CREATE = "-/+"
    REPLACE_CREATE_DELETE = "+/-"
    CREATE = "+"
    UPDATE = "~"
    DELETE = "-"
    FORGET = "#"
    IMPORT_NO_CHANGE = "="
    SUPPRESSED = ""


class OutputSymbol(str, Enum):
    """Markers used for output changes in the compact diff listing."""

    CREATE = "+"
    UPDATE = "~"
    DELETE = "-"
    SUPPRESSED = ""
