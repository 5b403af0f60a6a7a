"""Pagination models shared by every collection listing."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Links(BaseModel):
    """Cursors for the neighbouring pages. Empty strings mean no such page."""

    model_config = ConfigDict(extra="ignore")

    next: Optional[str] = None
    prev: Optional[str] = None


class Meta(BaseModel):
    """Pagination metadata returned alongside a collection.

    Passed back to the caller verbatim; feed ``links.next`` into
    ``ListOptions.cursor`` to fetch the following page.
    """

    model_config = ConfigDict(extra="ignore")

    total: Optional[int] = None
    links: Optional[Links] = None


class ListOptions(BaseModel):
    """Pagination controls and filters for list operations.

    Unset fields are left out of the query string, so ``ListOptions()``
    requests the first page with server defaults.
    """

    model_config = ConfigDict(extra="forbid")

    per_page: Optional[int] = None
    cursor: Optional[str] = None
    label: Optional[str] = None
    region: Optional[str] = None
    tag: Optional[str] = None
    main_ip: Optional[str] = None
    description: Optional[str] = None
