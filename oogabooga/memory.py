"""Simulated program memory: a free-list heap, temporary storage and arenas.

Addresses handed out here are plain integers in a private address space.
The heap keeps real bytes behind them, so allocations can be read and
written; the temporary storage and arenas only hand out addresses.
"""

from __future__ import annotations

import bisect
import enum
import sys
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional, TextIO, Tuple


def KB(x: int) -> int:
    return x * 1024


def MB(x: int) -> int:
    return KB(x) * 1024


def GB(x: int) -> int:
    return MB(x) * 1024


INIT_MEMORY_SIZE = KB(50)
INITIAL_PROGRAM_MEMORY_SIZE = MB(5)
TEMPORARY_STORAGE_SIZE = MB(2)
DEFAULT_PAGE_SIZE = 4096
VIRTUAL_MEMORY_BASE = 0x0000690000000000

HEAP_ALIGNMENT = 16
HEAP_BLOCK_HEADER_SIZE = 32
HEAP_METADATA_SIZE = 16
_FREED_FILL_BYTE = 0x69


def align_next(value: int, alignment: int) -> int:
    """Round ``value`` up to a multiple of ``alignment``."""
    if alignment <= 0:
        raise ValueError("alignment must be positive")
    return -(-value // alignment) * alignment


def align_previous(value: int, alignment: int) -> int:
    """Round ``value`` down to a multiple of ``alignment``."""
    if alignment <= 0:
        raise ValueError("alignment must be positive")
    return (value // alignment) * alignment


def get_next_power_of_two(value: int) -> int:
    """The smallest power of two that is at least ``value`` (1 for 0 and 1)."""
    if value <= 1:
        return 1
    return 1 << (value - 1).bit_length()


class AllocatorMessage(enum.Enum):
    ALLOCATE = 0
    DEALLOCATE = 1
    REALLOCATE = 2


class HeapError(Exception):
    """A bad pointer, a corrupt heap or an allocation the heap cannot serve."""


@dataclass
class _Block:
    address: int
    size: int
    memory: bytearray
    free: List[List[int]] = field(default_factory=list)  # sorted [address, size]
    total_allocated: int = 0

    @property
    def start(self) -> int:
        return self.address + HEAP_BLOCK_HEADER_SIZE

    @property
    def usable_size(self) -> int:
        return self.size - HEAP_BLOCK_HEADER_SIZE

    def contains(self, address: int) -> bool:
        return self.start <= address < self.address + self.size


class Heap:
    """A best-fit free-list heap made of page-aligned blocks."""

    def __init__(
        self,
        default_block_size: int = INITIAL_PROGRAM_MEMORY_SIZE,
        page_size: int = DEFAULT_PAGE_SIZE,
        base_address: int = VIRTUAL_MEMORY_BASE,
        max_block_size: Optional[int] = None,
    ) -> None:
        if page_size <= 0 or default_block_size <= 0:
            raise ValueError("block and page sizes must be positive")
        self.page_size = page_size
        self.max_block_size = (
            max_block_size
            if max_block_size is not None
            else align_next(MB(500), page_size)
        )
        self.default_block_size = min(self.max_block_size, default_block_size)
        self._next_address = align_next(base_address, page_size)
        self._blocks: List[_Block] = []
        self._allocations: Dict[int, Tuple[int, _Block]] = {}
        self._lock = threading.Lock()
        self._make_block(self.default_block_size)

    @property
    def block_count(self) -> int:
        return len(self._blocks)

    def _make_block(self, size: int) -> _Block:
        size = align_next(size + HEAP_BLOCK_HEADER_SIZE, self.page_size)
        block = _Block(self._next_address, size, bytearray(size))
        block.free.append([block.start, block.usable_size])
        self._next_address += size
        self._blocks.append(block)
        return block

    @staticmethod
    def _search_block(block: _Block, size: int) -> Optional[int]:
        best: Optional[int] = None
        best_delta = 0
        for index, (_, node_size) in enumerate(block.free):
            if node_size == size:
                return index
            if node_size > size:
                delta = node_size - size
                if best is None or delta < best_delta:
                    best, best_delta = index, delta
        return best

    def alloc(self, size: int) -> int:
        """Allocate ``size`` bytes and return the 16-byte aligned address."""
        if size < 0:
            raise ValueError("size must not be negative")
        total = size + HEAP_METADATA_SIZE
        total = (total + HEAP_ALIGNMENT) & ~(HEAP_ALIGNMENT - 1)
        if total >= self.max_block_size:
            raise HeapError(
                f"allocation of {size} bytes is larger than the maximum heap block size"
            )
        with self._lock:
            best_block: Optional[_Block] = None
            best_index = 0
            best_delta = 0
            for block in self._blocks:
                if block.usable_size < total:
                    continue
                index = self._search_block(block, total)
                if index is None:
                    continue
                delta = block.free[index][1] - total
                if best_block is None or delta < best_delta:
                    best_block, best_index, best_delta = block, index, delta
                if delta == 0:
                    break
            if best_block is None:
                best_block = self._make_block(max(self.default_block_size, total))
                best_index = 0

            node_address, node_size = best_block.free[best_index]
            if node_size == total:
                del best_block.free[best_index]
            else:
                best_block.free[best_index] = [node_address + total, node_size - total]
            best_block.total_allocated += total

            address = node_address + HEAP_METADATA_SIZE
            self._allocations[address] = (total, best_block)
        return address

    def dealloc(self, address: int) -> None:
        """Return the allocation at ``address`` to the heap."""
        with self._lock:
            entry = self._allocations.pop(address, None)
            if entry is None:
                raise HeapError(
                    "Heap error. Either 1) You passed a bad pointer to dealloc "
                    "or 2) You corrupted the heap."
                )
            total, block = entry
            node_address = address - HEAP_METADATA_SIZE
            offset = node_address - block.address
            block.memory[offset:offset + total] = bytes([_FREED_FILL_BYTE]) * total
            block.total_allocated -= total

            free = block.free
            index = bisect.bisect_left(free, [node_address, 0])
            free.insert(index, [node_address, total])
            if index + 1 < len(free) and free[index][0] + free[index][1] == free[index + 1][0]:
                free[index][1] += free[index + 1][1]
                del free[index + 1]
            if index > 0 and free[index - 1][0] + free[index - 1][1] == free[index][0]:
                free[index - 1][1] += free[index][1]
                del free[index]

    def allocation_size(self, address: int) -> int:
        """Bytes usable at ``address``; at least what was asked for."""
        entry = self._allocations.get(address)
        if entry is None:
            raise HeapError(f"no heap allocation at address {address:#x}")
        return entry[0] - HEAP_METADATA_SIZE

    def realloc(self, address: Optional[int], size: int) -> int:
        """Move an allocation to a new one of ``size`` bytes, keeping its data."""
        if address is None:
            return self.alloc(size)
        old_size = self.allocation_size(address)
        new_address = self.alloc(size)
        self.write(new_address, self.read(address, min(size, old_size)))
        self.dealloc(address)
        return new_address

    def _locate(self, address: int, size: int) -> Tuple[_Block, int]:
        if size < 0:
            raise ValueError("size must not be negative")
        for start, (total, block) in self._allocations.items():
            if start <= address and address + size <= start + total - HEAP_METADATA_SIZE:
                return block, address - block.address
        raise HeapError(f"range at {address:#x} of {size} bytes is not in an allocation")

    def read(self, address: int, size: int) -> bytes:
        """Read ``size`` bytes from inside an allocation."""
        with self._lock:
            block, offset = self._locate(address, size)
            return bytes(block.memory[offset:offset + size])

    def write(self, address: int, data: bytes) -> None:
        """Write ``data`` inside an allocation."""
        with self._lock:
            block, offset = self._locate(address, len(data))
            block.memory[offset:offset + len(data)] = data

    def free_nodes(self) -> List[Tuple[int, int]]:
        """All free nodes as ``(address, size)``, block by block."""
        with self._lock:
            return [tuple(node) for block in self._blocks for node in block.free]

    def sanity_check(self) -> None:
        """Raise HeapError if any block's bookkeeping is inconsistent."""
        with self._lock:
            for block in self._blocks:
                total_free = 0
                previous_end = block.start
                for node_address, node_size in block.free:
                    if node_size <= 0 or not block.contains(node_address):
                        raise HeapError("Heap is corrupt")
                    if node_address < previous_end:
                        raise HeapError("Free nodes overlap or are out of order")
                    previous_end = node_address + node_size
                    if previous_end > block.address + block.size:
                        raise HeapError("Heap is corrupt")
                    total_free += node_size
                if block.total_allocated + total_free != block.usable_size:
                    raise HeapError("Heap is corrupt.")


class TemporaryStorage:
    """A ring of scratch memory that wraps to its start when it runs out."""

    def __init__(
        self,
        capacity: int = TEMPORARY_STORAGE_SIZE,
        heap: Optional[Heap] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.start = heap.alloc(capacity) if heap is not None else 0
        self.pointer = self.start
        self.has_warned_overflow = False
        self._stream = stream

    def alloc(self, size: int) -> int:
        """Hand out ``size`` bytes, wrapping around at the end."""
        if not 0 <= size < self.capacity:
            raise ValueError("size is too large for temporary storage")
        address = self.pointer
        if address + size >= self.start + self.capacity:
            if not self.has_warned_overflow:
                stream = self._stream if self._stream is not None else sys.stdout
                stream.write(
                    "WARNING: temporary storage was overflown, "
                    "we wrap around at the start.\n"
                )
                self.has_warned_overflow = True
            address = self.start
        self.pointer = address + size
        return address

    def reset(self) -> None:
        """Start handing out from the beginning again."""
        self.pointer = self.start
        self.has_warned_overflow = False


class Arena:
    """A bump allocator over a fixed region."""

    def __init__(
        self,
        size: int,
        heap: Optional[Heap] = None,
        start: Optional[int] = None,
    ) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        if start is None:
            size = align_next(size, 8)
            start = heap.alloc(size) if heap is not None else 0
        self.start = start
        self.next = start
        self.size = size

    @property
    def used(self) -> int:
        return self.next - self.start

    def push(self, size: int) -> int:
        """Hand out ``size`` bytes at the current position."""
        address = self.next
        self.next += size
        return address

    def allocate(self, message: AllocatorMessage, size: int) -> Optional[int]:
        """Serve an allocator request; sizes above 8 are aligned to 8."""
        if size > 8:
            size = align_next(size, 8)
        if message is AllocatorMessage.ALLOCATE:
            return self.push(size)
        if message is AllocatorMessage.DEALLOCATE:
            return None
        raise ValueError("Arena allocator cannot 'reallocate'")


class InitializationArena:
    """Fixed memory for use before the heap is ready; never freed."""

    def __init__(self, capacity: int = INIT_MEMORY_SIZE, start: int = 0) -> None:
        self.capacity = capacity
        self.start = start
        self.head = start

    def alloc(self, size: int) -> int:
        address = self.head
        self.head += size
        if self.head >= self.start + self.capacity:
            raise MemoryError(
                "Out of initialization memory! Please provide more by "
                "increasing INIT_MEMORY_SIZE"
            )
        return address