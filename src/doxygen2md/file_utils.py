"""Async file helpers that push blocking I/O onto worker threads."""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path


async def read_bytes_async(path: Path) -> bytes:
    """Read raw bytes so the XML declaration decides the encoding."""
    return await asyncio.to_thread(path.read_bytes)


async def mkdir_async(
    path: Path, parents: bool = False, exist_ok: bool = False
) -> None:
    """Create a directory asynchronously using a thread pool."""
    await asyncio.to_thread(path.mkdir, parents=parents, exist_ok=exist_ok)


async def copy_file_async(source: Path, destination: Path) -> Path:
    """Copy one file, keeping its metadata, and return the destination."""
    await asyncio.to_thread(shutil.copy2, source, destination)
    return destination
