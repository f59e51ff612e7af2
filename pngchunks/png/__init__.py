'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html> and
is available a full test-suite with a lot of PNG images covering all
the possible cases at <http://www.schaik.com/pngsuite/>.

A file is a fixed signature followed by a list of chunks, the last one
being always IEND. Only the framing is handled here: the data of each
chunk is kept as opaque bytes.
'''
from ..core import Chunk
from .. import fields
from ..properties import Dependency
from ..common import crc
from ..exceptions import MissingEndChunk
from ..streams import Stream
from .chunk_type import ChunkType


SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'
END_CHUNK_TYPE = ChunkType(b'IEND')
MAX_LENGTH = 0xffffffff


class ChunkTypeField(fields.StringField):
    '''The 4 bytes of the type, unpacked as a validated ChunkType.'''

    def __init__(self, **kw):
        super().__init__(ChunkType.LENGTH, **kw)

    def value_from_default(self):
        return None

    def format(self, value):
        return str(value)

    def size_of(self, value):
        return ChunkType.LENGTH

    def update(self, values):
        pass

    def pack(self, value):
        return value.raw

    def unpack(self, stream, values):
        raw = super().unpack(stream, values)

        chunk_type = ChunkType(raw)
        chunk_type.validate()

        return chunk_type


class PNGHeader(Chunk):
    magic = fields.StringField(8, default=SIGNATURE, is_magic=True)


class PNGChunk(Chunk):
    '''This is the main data structure of the format: the 4 fields represent
    a chunk into the file. Each field is intended big-endian.

    A chunk is defined as critical or ancillary depending on the case of the
    starting letter of the type field.

    The crc field is network-byte-order CRC-32 computed over the chunk type and chunk data, but not the length.

    # Critical chunks

     1. IHDR: contains image's width, height, bit depth, color type, compression method, filter method and interlace method
     2. PLTE: contains the palette data
     3. IDAT: contains the actual image data (compressed)
     4. IEND: is the terminator chunk

    A chunk can't be modified: build a new one with PNGChunk(chunk_type, data)
    and the length and the crc are calculated.
    '''
    length = fields.StructField('I', endianess=fields.Endianess.BIG_ENDIAN)  # big endian
    type   = ChunkTypeField()
    data   = fields.StringField(Dependency('.length'))
    crc    = crc.CRCField(['type', 'data'], endianess=fields.Endianess.BIG_ENDIAN, formatter='%08x')  # network byte order

    def __init__(self, chunk_type, data=b''):
        data = bytes(data)
        if len(data) > MAX_LENGTH:
            raise ValueError(f'a chunk can contain at most {MAX_LENGTH} bytes, not {len(data)}')

        super().__init__(type=ChunkType.coerce(chunk_type), data=data)

    def __str__(self):
        return '\n'.join([
            'Chunk {',
            f'  Length: {self.length}',
            f'  Type: {self.type}',
            f'  Data: {len(self.data)} bytes',
            f'  Crc: {self.crc}',
            '}',
        ])

    def isCritical(self):
        return self.type.is_critical()

    def data_as_string(self):
        return self.data.decode('utf-8')


def _type_raw(chunk_type):
    if isinstance(chunk_type, ChunkType):
        return chunk_type.raw

    if isinstance(chunk_type, str):
        return chunk_type.encode('utf-8')

    return bytes(chunk_type)


class PNGFile(Chunk):
    '''The whole image: the signature and the chunks.

    The chunks are owned by the instance, the only way to change them
    is via append() and remove_first(), that take care of keeping IEND as
    the last one.'''
    header = fields.ChunkField(PNGHeader)
    chunks = fields.ArrayField(PNGChunk)

    def __init__(self, chunks=()):
        super().__init__(chunks=[PNGChunk(END_CHUNK_TYPE)])

        for chunk in chunks:
            self.append(chunk)

    def __str__(self):
        return '\n'.join(
            ['PNG file with %d chunks' % len(self)] + [str(chunk) for chunk in self.chunks]
        )

    def __len__(self):
        return len(self._values['chunks'])

    def __iter__(self):
        return iter(self.chunks)

    @classmethod
    def from_file(cls, path):
        with Stream(path) as stream:
            return cls.unpack(stream)

    def save(self, path):
        '''Write the packed image at the given path, overwriting it.'''
        data = self.pack()
        self.logger.debug('saving %d bytes at \'%s\'' % (len(data), path))

        with open(path, 'wb') as f:
            f.write(data)

    @property
    def signature(self):
        return self.header.magic

    def validate(self):
        super().validate()

        chunks = self._values['chunks']
        if not chunks or chunks[-1].type != END_CHUNK_TYPE:
            raise MissingEndChunk(f'the last chunk must be {END_CHUNK_TYPE}', chain=['chunks'])

    def append(self, chunk):
        '''Insert the chunk just before IEND.'''
        if chunk.type == END_CHUNK_TYPE:
            raise ValueError(f'{END_CHUNK_TYPE} is already present and must be the last chunk')

        chunks = self._values['chunks']
        self.logger.debug('appending chunk %s at index %d' % (chunk.type, len(chunks) - 1))
        chunks.insert(len(chunks) - 1, chunk)

    def remove_first(self, chunk_type):
        '''Remove and return the first chunk with the given type, None if there is not.

        The type is compared byte by byte, without validation; the last IEND
        is never removed.'''
        raw = _type_raw(chunk_type)
        chunks = self._values['chunks']

        for index, chunk in enumerate(chunks[:-1]):
            if chunk.type.raw == raw:
                self.logger.debug('removing chunk %s at index %d' % (chunk.type, index))
                return chunks.pop(index)

        return None

    def find_all(self, chunk_type):
        raw = _type_raw(chunk_type)

        return [chunk for chunk in self.chunks if chunk.type.raw == raw]

    def chunk_by_type(self, chunk_type):
        '''Returns the first chunk with the given type.'''
        found = self.find_all(chunk_type)

        return found[0] if found else None
