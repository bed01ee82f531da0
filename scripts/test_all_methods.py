#!/usr/bin/env python3
"""Integration test: exercise every public method on BlockfrostClient against a live network.

Reads the project id from BLOCKFROST_API_KEY and the network from
BLOCKFROST_NETWORK (defaults to cardano-preview).
"""

from __future__ import annotations

import logging
import os
import sys

from blockfrost_sdk import ALL_PAGES, BlockfrostClient, BlockfrostHTTPError, RequestOptions, configure, configure_logging

passed: list[str] = []
failed: list[tuple[str, str]] = []
skipped: list[tuple[str, str]] = []


def ok(name: str, result: object = None) -> None:
    tag = type(result).__name__ if result is not None else "None"
    if isinstance(result, list):
        tag = f"list[{len(result)}]"
    print(f"  PASS  {name}  -> {tag}")
    passed.append(name)


def fail(name: str, err: Exception) -> None:
    msg = str(err)[:200]
    print(f"  FAIL  {name}  -> {msg}")
    failed.append((name, msg))


def skip(name: str, reason: str) -> None:
    print(f"  SKIP  {name}  ({reason})")
    skipped.append((name, reason))


def crash(name: str, exc: Exception) -> None:
    msg = f"{type(exc).__name__}: {exc}"[:200]
    print(f"  CRASH {name}  -> {msg}")
    failed.append((name, msg))


def run(name: str, fn, *, allowed: set[int] | None = None):
    """Run fn(), record pass/fail/expected-error."""
    try:
        result = fn()
        ok(name, result)
        return result
    except BlockfrostHTTPError as e:
        if allowed and e.status_code in allowed:
            ok(name, e)
        else:
            fail(name, e)
        return None
    except Exception as e:
        crash(name, e)
        return None


def main() -> None:
    if not os.getenv("BLOCKFROST_API_KEY"):
        print("BLOCKFROST_API_KEY is not set")
        sys.exit(2)

    configure_logging(level=logging.WARNING, json_format=False)
    configure("smoke", network=os.getenv("BLOCKFROST_NETWORK", "cardano-preview"), retry_max_attempts=2)
    client = BlockfrostClient("smoke")

    print("\n=== Health ===")
    run("health", lambda: client.health())

    print("\n=== Blocks ===")
    latest = run("blocks_latest", lambda: client.blocks_latest())
    start = latest.get("height", 1) - 250 if isinstance(latest, dict) and latest.get("height") else None

    if start and start > 0:
        run("block", lambda: client.block(start))
        run("blocks_next (page 1)", lambda: client.blocks_next(start, options=RequestOptions(page=1, count=10)))
        run("blocks_next (all pages)", lambda: client.blocks_next(start, options=RequestOptions(page=ALL_PAGES, max_concurrency=3)))
        run("blocks_previous (page 2)", lambda: client.blocks_previous(start, options=RequestOptions(page=2)))
    else:
        for m in ("block", "blocks_next (page 1)", "blocks_next (all pages)", "blocks_previous (page 2)"):
            skip(m, "latest block unavailable")

    print("\n=== Errors ===")
    run("block (missing)", lambda: client.block("0" * 64), allowed={404})

    client.close()

    print("\n" + "=" * 60)
    print(f"PASSED: {len(passed)}   FAILED: {len(failed)}   SKIPPED: {len(skipped)}")
    if failed:
        print("\nFailed methods:")
        for name, err in failed:
            print(f"  - {name}: {err}")
    if skipped:
        print("\nSkipped methods:")
        for name, reason in skipped:
            print(f"  - {name}: {reason}")
    print("=" * 60)

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
