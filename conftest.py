"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Sample packet sources shared by the co-located test modules
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from dotenv import load_dotenv

if TYPE_CHECKING:
    from packet2drawio.ir import BitRange

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Common Test Fixtures
# =============================================================================

TCP_SOURCE = """\
packet-beta
title TCP Packet
0-15: "Source Port"
16-31: "Destination Port"
32-63: "Sequence Number"
64-95: Acknowledgment Number
"""


@pytest.fixture
def tcp_source() -> str:
    """Mermaid packet-beta source for the first rows of a TCP header.

    Returns:
        Source text with a header line, a title and four fields.
    """
    return TCP_SOURCE


@pytest.fixture
def tcp_ranges() -> list[BitRange]:
    """Bit ranges matching `tcp_source`.

    Returns:
        Four row-aligned ranges.
    """
    from packet2drawio.ir import BitRange

    return [
        BitRange(start=0, end=15, label="Source Port"),
        BitRange(start=16, end=31, label="Destination Port"),
        BitRange(start=32, end=63, label="Sequence Number"),
        BitRange(start=64, end=95, label="Acknowledgment Number"),
    ]


@pytest.hookimpl(hookwrapper=True, trylast=True)
def pytest_runtest_call(item: pytest.Item):
    """Empty the root logger's handlers for tests using `fresh_root`.

    pytest's logging plugin attaches its capture handlers to the root logger
    during the call phase, after `fresh_root` has emptied the handler list.
    This wrapper runs inside the logging plugin's, so the handlers are cleared
    again right before the test body runs. `fresh_root` has already
    monkeypatched the handler list, and its teardown restores the original.
    """
    if "fresh_root" in getattr(item, "fixturenames", ()):
        import logging

        logging.getLogger().handlers.clear()
    yield
