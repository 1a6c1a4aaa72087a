import pytest

import wordvm.runtime.loader as loader
from wordvm.runtime.errors import ImageError


def test_little_endian_words():
    assert loader.words_from_bytes(b'\x09\x00\x00\x80\x04\x00') == [9, 32768, 4]


def test_empty_image():
    assert len(loader.memory_from_bytes(b'')) == 0


def test_odd_length():
    with pytest.raises(ImageError):
        loader.words_from_bytes(b'\x00\x00\x01')


def test_too_large():
    with pytest.raises(ImageError):
        loader.words_from_bytes(bytes(2 * 0x10001))


def test_roundtrip_bytes():
    words = [0, 1, 0x7FFF, 0x8000, 0xFFFF]
    assert loader.words_from_bytes(loader.words_to_bytes(words)) == words


def test_from_file(tmp_path):
    path = tmp_path / 'image.bin'
    path.write_bytes(b'\x13\x00\x41\x00')

    memory = loader.memory_from_file(path)
    assert memory.dump() == [19, 65]
