"""Build contents-index queries."""

import httpx

from .models import Architecture, Branch, Repository, SearchQuery, Wildcard


def build_query(
    file_pattern: str,
    dir_pattern: str,
    branch: Branch | str | None,
    repository: Repository | str | None,
    architecture: Architecture | str | None,
) -> SearchQuery:
    """Build a validated SearchQuery.

    Raises ValidationError if branch, repository or architecture is set to
    something outside its allowed values. Empty values are sent as-is.
    """
    return SearchQuery(
        file_pattern=file_pattern,
        dir_pattern=dir_pattern,
        branch=branch,
        repository=repository,
        architecture=architecture,
    )


def query_params(query: SearchQuery) -> list[tuple[str, str]]:
    """Query parameters in the order the index receives them."""
    return [
        ("file", query.file_pattern),
        ("path", query.dir_pattern),
        ("branch", query.branch.value if query.branch else ""),
        ("repo", query.repository.value if query.repository else ""),
        ("arch", query.architecture.value if query.architecture else ""),
    ]


def encode_query(query: SearchQuery) -> str:
    return str(httpx.QueryParams(query_params(query)))


def search_url(query: SearchQuery, base_url: str) -> str:
    return f"{base_url}?{encode_query(query)}"


def apply_wildcard(value: str, wildcard: Wildcard | str | None) -> str:
    """Append a wildcard to the raw query. Raises ValidationError for unknown wildcards."""
    wildcard = Wildcard.coerce(wildcard, "wildcard")
    if wildcard is None:
        return value
    return f"{value}{wildcard.value}"
