"""Container address resolution.

Turns a user-supplied endpoint URL such as
`https://acct.blob.core.windows.net/mycontainer/docs` into a
`ContainerAddress` plus the browse path that follows the container name.
"""

from __future__ import annotations

import re
from urllib.parse import quote, unquote, urlsplit

from blobnav.core.errors import MalformedUrl, MissingContainer, NotABlobEndpoint
from blobnav.core.models import ContainerAddress, Node, ResolvedUrl

# <account>.blob.<cloud suffix>; public, China, US Gov and German clouds.
_BLOB_HOST_RE = re.compile(
    r"^(?P<account>[a-z0-9-]+)\.blob\.core\."
    r"(?:windows\.net|chinacloudapi\.cn|usgovcloudapi\.net|cloudapi\.de)$"
)


def normalize_path(path: str | None) -> str:
    """Return a browse path without leading or trailing slashes ("" is root)."""
    if not path:
        return ""
    return path.strip("/")


def resolve(raw_url: str) -> ResolvedUrl:
    """
    Resolve an endpoint URL into a container address and initial path.

    Raises:
        MalformedUrl: The input is empty or not an http(s) URL.
        NotABlobEndpoint: The host is not `<account>.blob.core.<cloud>`.
        MissingContainer: The URL has no path segment naming a container.
    """
    url = (raw_url or "").strip()
    if not url:
        raise MalformedUrl("Please enter a valid Azure Blob Storage URL")

    try:
        parts = urlsplit(url)
        hostname = parts.hostname
        port = parts.port
    except ValueError as exc:
        raise MalformedUrl() from exc

    if parts.scheme not in ("http", "https") or not hostname:
        raise MalformedUrl()

    match = _BLOB_HOST_RE.match(hostname)
    if not match:
        raise NotABlobEndpoint()

    segments = [unquote(s) for s in parts.path.split("/") if s]
    if not segments:
        raise MissingContainer()

    container = segments[0]
    host = f"{hostname}:{port}" if port is not None else hostname
    address = ContainerAddress(
        account_name=match.group("account"),
        container_name=container,
        base_url=f"{parts.scheme}://{host}/{container}",
    )
    return ResolvedUrl(address=address, initial_path="/".join(segments[1:]))


def file_url(address: ContainerAddress, node: Node) -> str:
    """Return the direct URL of a file node. Folders have no URL."""
    if node.is_folder:
        raise ValueError(f"Folder '{node.full_path}' has no direct URL.")
    return f"{address.base_url}/{quote(node.full_path, safe='/')}"
