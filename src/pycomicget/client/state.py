"""Swappable connection state shared by every call on one client.

The transport handle and the API host are guarded independently. Each
accessor holds its lock only long enough to copy the reference out; no lock
is ever held across network I/O.

``snapshot()`` and ``configure()`` take both locks, always transport first,
so a pair swapped through ``configure()`` is never observed half-applied.
Separate ``set_transport()``/``set_host()`` calls remain independent: a
snapshot taken between them sees the new value of one field and the old
value of the other.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass(frozen=True)
class ConnectionSnapshot:
    """Transport and host captured for the lifetime of a single call."""

    transport: httpx.AsyncClient
    host: str


class ConnectionState:
    """Per-client mutable connection configuration (last-writer-wins)."""

    def __init__(self, transport: httpx.AsyncClient, host: str):
        self._transport = transport
        self._host = host
        self._transport_lock = asyncio.Lock()
        self._host_lock = asyncio.Lock()

    async def get_transport(self) -> httpx.AsyncClient:
        async with self._transport_lock:
            return self._transport

    async def set_transport(self, transport: httpx.AsyncClient) -> None:
        async with self._transport_lock:
            self._transport = transport

    async def get_host(self) -> str:
        async with self._host_lock:
            return self._host

    async def set_host(self, host: str) -> None:
        async with self._host_lock:
            self._host = host

    async def snapshot(self) -> ConnectionSnapshot:
        """Copy both fields out for use by one call."""
        async with self._transport_lock:
            async with self._host_lock:
                return ConnectionSnapshot(self._transport, self._host)

    async def configure(
        self,
        transport: Optional[httpx.AsyncClient] = None,
        host: Optional[str] = None,
    ) -> None:
        """Replace the transport and/or host as one unit.

        Args:
            transport: New transport handle, or None to keep the current one
            host: New API host, or None to keep the current one
        """
        async with self._transport_lock:
            async with self._host_lock:
                if transport is not None:
                    self._transport = transport
                if host is not None:
                    self._host = host
