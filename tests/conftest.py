"""
Test bootstrap:
- Provide seeded random payloads for round-trip checks
- Provide the RFC4648 section 10 test vectors
"""
import os
import random

import pytest

# Number of random payloads per round-trip test
ROUNDTRIP_COUNT = int(os.environ.get("CONNX_ROUNDTRIP_COUNT", "200"))

RFC4648_INPUTS = [b"", b"f", b"fo", b"foo", b"foob", b"fooba", b"foobar"]


@pytest.fixture
def rng():
    """Deterministic random source so failures are reproducible."""
    return random.Random(0xC0DEC)


@pytest.fixture
def random_payloads(rng):
    """Random byte strings of every length 0-64 plus some longer ones."""
    payloads = [bytes(rng.randrange(256) for _ in range(n)) for n in range(65)]
    for _ in range(ROUNDTRIP_COUNT):
        n = rng.randint(0, 1024)
        payloads.append(bytes(rng.randrange(256) for _ in range(n)))
    return payloads


@pytest.fixture
def rfc4648_inputs():
    return list(RFC4648_INPUTS)
