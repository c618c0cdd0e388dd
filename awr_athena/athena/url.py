"""Athena JDBC endpoint URLs."""

from __future__ import annotations

URL_TEMPLATE = "jdbc:awsathena://athena.{region}.amazonaws.com:443/"


def build_url(region: str) -> str:
    """Return the Athena JDBC endpoint for ``region``.

    The region is interpolated as-is; an unknown region only fails once the
    driver tries to reach the endpoint.
    """
    if not region:
        raise ValueError("region must be a non-empty string")
    return URL_TEMPLATE.format(region=region)


__all__ = ["URL_TEMPLATE", "build_url"]
