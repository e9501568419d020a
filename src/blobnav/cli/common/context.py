"""Application context management for the CLI."""

from dataclasses import dataclass

from blobnav.cli.common.exits import exit_from_exc
from blobnav.core.adapters.azureblob import AzureBlobListingAdapter
from blobnav.core.address import resolve
from blobnav.core.client import get_container_client
from blobnav.core.errors import ResolutionError
from blobnav.core.models import ContainerAddress


@dataclass
class BrowseAppContext:
    """Resolved container plus the listing adapter for it."""

    address: ContainerAddress
    initial_path: str
    adapter: AzureBlobListingAdapter


def build_browse_context(
    url: str, *, timeout: int | None = None, single_page: bool = False
) -> BrowseAppContext:
    """Resolve the container URL and build the listing adapter for it.

    Exits with code 2 when the URL does not name a blob container; no
    request is made in that case.
    """
    try:
        resolved = resolve(url)
    except ResolutionError as exc:
        exit_from_exc(exc, message=exc.message, code=2)
    adapter = AzureBlobListingAdapter(
        get_container_client(resolved.address, timeout=timeout),
        single_page=single_page,
    )
    return BrowseAppContext(
        address=resolved.address,
        initial_path=resolved.initial_path,
        adapter=adapter,
    )
