import io
import struct
import zlib

import pytest
from PIL import Image


SIGNATURE = b'\x89PNG\r\n\x1a\n'
IEND = b'\x00\x00\x00\x00IEND\xaeB`\x82'


def build_chunk(chunk_type, data, crc=None):
    '''Encode a chunk by hand, with the right CRC if not indicated.'''
    if crc is None:
        crc = zlib.crc32(chunk_type + data)

    return struct.pack('>I', len(data)) + chunk_type + data + struct.pack('>I', crc)


@pytest.fixture
def minimal_png():
    '''The smallest container: signature and IEND.'''
    return SIGNATURE + IEND


@pytest.fixture
def image_png():
    '''A real 5x5 image encoded by Pillow.'''
    image = Image.new('RGB', (5, 5), color='red')
    buffer = io.BytesIO()
    image.save(buffer, format='PNG')

    return buffer.getvalue()


@pytest.fixture
def image_path(tmp_path, image_png):
    path = tmp_path / 'red.png'
    path.write_bytes(image_png)

    return path
