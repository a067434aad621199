from dataclasses import dataclass
from typing import List

from splitjoin.core.errors import InvalidInputError


@dataclass(frozen=True)
class ChunkPlan:
    """
    How a source of a given size is cut into parts.

    Every part is chunk_size_in_bytes long except the last, which holds
    the remainder (or a full chunk when the size divides evenly).
    """
    source_size: int
    chunk_size_in_bytes: int

    @property
    def part_count(self) -> int:
        return -(-self.source_size // self.chunk_size_in_bytes)

    def part_sizes(self) -> List[int]:
        sizes = [self.chunk_size_in_bytes] * self.part_count
        remainder = self.source_size % self.chunk_size_in_bytes
        if remainder:
            sizes[-1] = remainder
        return sizes


def plan_by_size(source_size: int, chunk_size_in_bytes: int) -> ChunkPlan:
    if chunk_size_in_bytes < 1:
        raise InvalidInputError("Chunk is less than 1 byte")
    return ChunkPlan(source_size=source_size, chunk_size_in_bytes=chunk_size_in_bytes)


def plan_by_count(source_size: int, number_of_parts: int) -> ChunkPlan:
    """
    Plan a split into number_of_parts parts of ceil(size / parts) bytes.

    The rounding up can leave fewer parts than requested: 10 bytes in 6
    parts is 2-byte chunks, so 5 parts. More parts than bytes gives one
    byte per part.
    """
    if number_of_parts < 1:
        raise InvalidInputError(f"Number of parts must be at least 1, got {number_of_parts}")
    chunk_size_in_bytes = -(-source_size // number_of_parts)
    return plan_by_size(source_size, chunk_size_in_bytes)
