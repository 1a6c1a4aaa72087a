import struct
import logging as lg
from pathlib import Path

from wordvm.common.hwconf import IMAGE_FMT, MEMORY_SIZE, WORD_SIZE
from wordvm.runtime.errors import ImageError
from wordvm.runtime.memory import Memory


def words_from_bytes(data: bytes) -> list[int]:
    if len(data) % WORD_SIZE:
        raise ImageError(f'Image size {len(data)} is not a multiple of {WORD_SIZE} bytes')

    count = len(data) // WORD_SIZE

    if count > MEMORY_SIZE:
        raise ImageError(f'Image of {count} words exceeds address space')

    return [word for (word,) in struct.iter_unpack(IMAGE_FMT, data)]


def words_to_bytes(words: list[int]) -> bytes:
    return b''.join(struct.pack(IMAGE_FMT, word) for word in words)


def memory_from_bytes(data: bytes) -> Memory:
    words = words_from_bytes(data)
    lg.debug(f'Loaded {len(words)} words')
    return Memory(words)


def memory_from_file(path: Path) -> Memory:
    lg.info(f'Loading image {path}')
    return memory_from_bytes(path.read_bytes())
