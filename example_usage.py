#!/usr/bin/env python3
"""
Basic usage examples for the restify client library.

Runs against the API given by RESTIFY_BASE_URL, signing requests when
RESTIFY_APP_ID and RESTIFY_APP_KEY are set.
"""

import asyncio
import logging
import sys
from enum import Enum

from restify import (
    Authorizer,
    Endpoint,
    Fail,
    Ok,
    RestClient,
    RestifyError,
    describable,
)


@describable({'V1': 'v1'})
class ApiVersion(Enum):
    V1 = 1


def show(label, result):
    match result:
        case Ok(value=value):
            print(f"   ✓ {label}: {value}")
        case Fail(raw_body=raw, reasons=reasons):
            print(f"   ✗ {label}: {'; '.join(reasons)}")
            if raw:
                print(f"     body: {raw[:200]}")


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.INFO)

    print("=== restify Basic Usage Examples ===\n")

    try:
        client = RestClient.from_env(timeout=10)
    except RestifyError as e:
        print(f"Configuration error: {e}")
        return 1

    print(f"1. Client created for: {client.base_url}")
    if client.authorizer:
        print(f"   Signing as app: {client.authorizer.app_id}\n")

    # Example 1: raw text response
    print("2. Health check (raw text)...")
    show("health", client.get(Endpoint().with_path("health"), result_type=str))

    # Example 2: JSON response with path parameters and query
    print("3. Fetching a user...")
    endpoint = (
        Endpoint()
        .with_version(ApiVersion.V1)
        .with_path("users/{id}", {"id": "42"})
        .with_query({"expand": "orders"})
    )
    print(f"   URL: {endpoint.build(client.base_url)}")
    show("user", client.get(endpoint, result_type=dict))

    # Example 3: signed POST with a JSON body
    print("4. Creating an order...")
    show("order", client.post(Endpoint().with_version("v1").with_path("orders"), {"sku": "A-1", "qty": 2}))

    # Example 4: same request asynchronously
    print("5. Creating an order (async)...")
    result = asyncio.run(
        client.post_async(Endpoint().with_version("v1").with_path("orders"), {"sku": "A-1", "qty": 3})
    )
    show("order", result)

    return 0


if __name__ == "__main__":
    sys.exit(main())
