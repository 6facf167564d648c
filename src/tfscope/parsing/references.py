"""
Terraform Reference Extraction.

Identifies the blocks an attribute value points at by pattern-matching
reference expressions such as `aws_instance.web.id`, `module.vpc.vpc_id`,
`data.aws_ami.ubuntu.id`, `var.region` and `local.tags`.

Both functions are pure: identical input always yields identical output.
"""

import re
from typing import List

_IDENT = r"[a-z_][a-z0-9_]*"

# Applied in this order; a token can satisfy several of them, so results are
# merged by string equality, keeping the first occurrence.
REFERENCE_PATTERNS = (
    # resource references: aws_instance.web.id
    re.compile(rf"{_IDENT}\.{_IDENT}\.{_IDENT}"),
    # module outputs: module.vpc.vpc_id
    re.compile(rf"module\.{_IDENT}\.{_IDENT}"),
    # data sources: data.aws_ami.ubuntu.id
    re.compile(rf"data\.{_IDENT}\.{_IDENT}\.{_IDENT}"),
    # input variables: var.environment
    re.compile(rf"var\.{_IDENT}"),
    # local values: local.common_tags
    re.compile(rf"local\.{_IDENT}"),
)


def base_reference(token: str) -> str:
    """
    Strip the trailing attribute/output segment from a reference token.

    Two-segment tokens (`var.x`, `local.x`) already name their target and
    are returned unchanged.
    """
    parts = token.split(".")
    if len(parts) < 3:
        return token
    return ".".join(parts[:-1])


def extract_references(value: str) -> List[str]:
    """
    Extract the base references found in a raw attribute value.

    Examples:
        >>> extract_references("aws_instance.web.id")
        ['aws_instance.web']
        >>> extract_references('"${var.environment}-logs"')
        ['var.environment']
    """
    clean = value.replace('"', "")
    refs: List[str] = []

    for pattern in REFERENCE_PATTERNS:
        for match in pattern.finditer(clean):
            base = base_reference(match.group(0))
            if base and base not in refs:
                refs.append(base)

    return refs


def parse_depends_on(value: str) -> List[str]:
    """
    Parse the right-hand side of a `depends_on` assignment.

    Accepts a bracketed list or a single reference, quoted or bare:

        >>> parse_depends_on('["aws_instance.web", module.vpc]')
        ['aws_instance.web', 'module.vpc']

    Entries without a dot cannot name a block and are dropped.
    """
    clean = value.strip()
    if clean.startswith("["):
        clean = clean[1:]
    if clean.endswith("]"):
        clean = clean[:-1]
    clean = clean.replace('"', "")

    parts = [part.strip() for part in clean.split(",")]
    return [part for part in parts if part and "." in part]
