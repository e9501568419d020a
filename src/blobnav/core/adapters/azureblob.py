"""Listing adapter over the Azure Blob SDK container client."""

from __future__ import annotations

import logging

from azure.core.exceptions import AzureError, HttpResponseError, ResourceNotFoundError
from azure.storage.blob import ContainerClient

from blobnav.core.errors import Forbidden, NotFound, TransportFailure
from blobnav.core.models import ListingEntry

logger = logging.getLogger(__name__)


class AzureBlobListingAdapter:
    """Adapter around the Azure Blob SDK container listing API."""

    def __init__(self, client: ContainerClient, *, single_page: bool = False) -> None:
        self.client = client
        self.single_page = single_page

    def _iter_blobs(self, prefix: str):
        """Yield blob properties under prefix, following continuation tokens."""
        paged = self.client.list_blobs(name_starts_with=prefix or None)
        if not self.single_page:
            yield from paged
            return
        # First service page only; the rest of the listing is dropped.
        for page in paged.by_page():
            yield from page
            return

    def list_entries(self, prefix: str) -> list[ListingEntry]:
        """List all blobs whose name starts with prefix."""
        try:
            entries = [
                ListingEntry(
                    key=blob.name,
                    size_bytes=int(getattr(blob, "size", None) or 0),
                    last_modified=getattr(blob, "last_modified", None),
                )
                for blob in self._iter_blobs(prefix)
                if getattr(blob, "name", None)
            ]
        except ResourceNotFoundError as exc:
            raise NotFound() from exc
        except HttpResponseError as exc:
            if exc.status_code == 404:
                raise NotFound() from exc
            if exc.status_code == 403:
                raise Forbidden() from exc
            raise TransportFailure(exc.reason or str(exc)) from exc
        except AzureError as exc:
            raise TransportFailure(str(exc)) from exc

        logger.debug("listed %d blobs under prefix '%s'", len(entries), prefix)
        return entries
