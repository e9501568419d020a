"""Construction of the Azure SDK client used for listings.

Containers are browsed anonymously: only containers with public list
access can be opened.
"""

from azure.storage.blob import ContainerClient

from blobnav.core.models import ContainerAddress

DEFAULT_TIMEOUT_SECONDS = 30


def get_container_client(
    address: ContainerAddress, timeout: int | None = None
) -> ContainerClient:
    """
    Create an anonymous ContainerClient for a resolved container.

    The timeout applies to both connecting and reading each response page.
    """
    timeout = timeout or DEFAULT_TIMEOUT_SECONDS
    return ContainerClient.from_container_url(
        address.base_url,
        connection_timeout=timeout,
        read_timeout=timeout,
    )
