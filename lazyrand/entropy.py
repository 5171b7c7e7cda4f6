"""Best-effort seed material for generators created without a seed.

Combines wall-clock and high-resolution timers, the address of a freshly
allocated object, and the thread and process identity, then whitens the mix
with BLAKE2b. The only goal is that unseeded generators started at nearly the
same moment (parallel test workers, threads in one process) end up on
different streams. Not suitable for anything security related.
"""

from __future__ import annotations

import hashlib
import os
import struct
import threading
import time

from .mixer import MASK64


def generate() -> int:
    """Return a 64-bit seed derived from ambient process state."""
    marker = object()
    material = struct.pack(
        "<6Q",
        time.time_ns() & MASK64,
        time.perf_counter_ns() & MASK64,
        id(marker) & MASK64,
        threading.get_ident() & MASK64,
        os.getpid() & MASK64,
        id(threading.current_thread()) & MASK64,
    )
    digest = hashlib.blake2b(material, digest_size=8).digest()
    return int.from_bytes(digest, "little")
