"""Provider documentation links for resource types."""

from urllib.parse import quote

from .config import PROVIDER_DOC_URLS, PROVIDER_PREFIXES, REGISTRY_URL


def get_provider_doc_url(resource_type: str) -> str:
    """
    Return the Terraform Registry documentation URL for a resource type.

    Exact table entries win; otherwise the hashicorp provider is inferred
    from the type prefix. Unknown providers fall back to a registry search.
    """
    if resource_type in PROVIDER_DOC_URLS:
        return PROVIDER_DOC_URLS[resource_type]

    for prefix, provider in PROVIDER_PREFIXES:
        if resource_type.startswith(prefix):
            resource_name = resource_type[len(prefix):]
            return f"{REGISTRY_URL}/providers/hashicorp/{provider}/latest/docs/resources/{resource_name}"

    return f"{REGISTRY_URL}/search?q={quote(resource_type, safe='')}"
