"""
Global Configuration and Static Tables.

This module centralizes the lookup tables used by the scanner and the
provider documentation helpers, plus the input safety limits that protect
the regex-based scanner from pathological input.
"""

from typing import Dict, List, Tuple

# --- Safety Limits ---
# Lines longer than this often crash regex engines (minified or generated HCL)
MAX_LINE_LENGTH = 10_000

# --- Validation ---

# Attributes that must be present on a resource of the given type.
# Missing ones are reported as advisories, never as errors.
REQUIRED_ATTRIBUTES: Dict[str, List[str]] = {
    "aws_instance": ["ami", "instance_type"],
    "aws_s3_bucket": ["bucket"],
    "aws_s3_bucket_acl": ["bucket", "acl"],
    "aws_s3_bucket_policy": ["bucket", "policy"],
    "aws_s3_object": ["bucket", "key"],
}

# --- Provider Documentation ---

REGISTRY_URL = "https://registry.terraform.io"

# Exact documentation pages, checked before the prefix rules
PROVIDER_DOC_URLS: Dict[str, str] = {
    "aws_instance": f"{REGISTRY_URL}/providers/hashicorp/aws/latest/docs/resources/instance",
    "aws_s3_bucket": f"{REGISTRY_URL}/providers/hashicorp/aws/latest/docs/resources/s3_bucket",
    "aws_s3_bucket_acl": f"{REGISTRY_URL}/providers/hashicorp/aws/latest/docs/resources/s3_bucket_acl",
    "aws_s3_bucket_policy": f"{REGISTRY_URL}/providers/hashicorp/aws/latest/docs/resources/s3_bucket_policy",
    "aws_s3_object": f"{REGISTRY_URL}/providers/hashicorp/aws/latest/docs/resources/s3_object",
}

# (resource type prefix, hashicorp provider name), in lookup order
PROVIDER_PREFIXES: Tuple[Tuple[str, str], ...] = (
    ("aws_", "aws"),
    ("azurerm_", "azurerm"),
    ("google_", "google"),
    ("kubernetes_", "kubernetes"),
    ("vsphere_", "vsphere"),
    ("vault_", "vault"),
    ("consul_", "consul"),
    ("nomad_", "nomad"),
    ("docker_", "docker"),
    ("helm_", "helm"),
    ("mysql_", "mysql"),
    ("postgresql_", "postgresql"),
    ("mongodb_", "mongodb"),
    ("redis_", "redis"),
)

# Providers that get their own bucket in blast radius breakdowns
BREAKDOWN_PROVIDERS: Tuple[str, ...] = ("aws", "azurerm", "google", "kubernetes")


def required_attributes_for(resource_type: str) -> List[str]:
    """Return the required attribute names for a resource type (may be empty)."""
    return REQUIRED_ATTRIBUTES.get(resource_type, [])


def provider_for(resource_type: str) -> str | None:
    """Return the hashicorp provider name for a resource type, if known."""
    for prefix, provider in PROVIDER_PREFIXES:
        if resource_type.startswith(prefix):
            return provider
    return None
