class PngChunksException(Exception):
    '''Base class to extend in order to throw exception in pngchunks.

    The keyword argument "chain" represents the layers (field names and
    array indexes) traversed before reaching the element that caused
    the exception; outer layers are prepended while the exception propagates.
    '''

    def __init__(self, *args, chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(*args)

    @property
    def location(self):
        return '.'.join(str(_) for _ in self.chain)

    def __str__(self):
        msg = super().__str__()
        if not self.chain:
            return msg

        return f'{msg} (at {self.location})'


class UnpackException(PngChunksException):
    pass


class UnexpectedEOF(UnpackException):
    '''The stream ended before all the bytes of an element were read.'''

    def __init__(self, what, expected, got, **kwargs):
        self.what = what
        self.expected = expected
        self.got = got
        super().__init__(
            f'unable to read {what}: expected {expected} bytes, got {got}',
            **kwargs,
        )


class InvalidSignature(UnpackException):

    def __init__(self, found, expected, **kwargs):
        self.found = found
        self.expected = expected
        super().__init__(f'invalid signature {found!r}, expected {expected!r}', **kwargs)


class MissingEndChunk(UnpackException):
    '''The chunks list doesn't terminate with the end marker.'''
    pass


class ChecksumMismatch(PngChunksException):

    def __init__(self, received, expected, **kwargs):
        self.received = received
        self.expected = expected
        super().__init__(f'Invalid CRC, received: {received}, expected: {expected}', **kwargs)


class ChunkTypeException(PngChunksException):
    '''Base for all the errors regarding the 4 letters identifying a chunk.'''

    def __init__(self, value, message, **kwargs):
        self.value = value
        super().__init__(message, **kwargs)


class InvalidLength(ChunkTypeException):

    def __init__(self, value, **kwargs):
        super().__init__(
            value,
            f'The chunk type "{value}" is invalid, it should have 4 characters',
            **kwargs,
        )


class InvalidCharacter(ChunkTypeException):

    def __init__(self, value, char, position, **kwargs):
        self.char = char
        self.position = position
        super().__init__(
            value,
            f'The chunk type "{value}" contains the invalid character {char!r} at position {position}, '
            'it should only contain characters that match the [a-zA-Z] pattern',
            **kwargs,
        )


class ReservedBitInvalid(ChunkTypeException):

    def __init__(self, value, **kwargs):
        super().__init__(
            value,
            f'The 3rd letter in the chunk type "{value}" is lowercase, '
            'the PNG spec requires this letter to be uppercase.',
            **kwargs,
        )


class UnsuitableChunkType(ChunkTypeException):
    '''The chunk type is valid but a hidden message must not be stored in it.'''
    position = None
    ordinal = None
    marks = None
    wanted = None

    def __init__(self, value, **kwargs):
        super().__init__(
            value,
            f'The {self.ordinal} letter in the chunk type "{value}" is uppercase, which marks the chunk '
            f'as {self.marks}. Hidden messages should be hidden in {self.wanted} chunks, '
            'so change it to be lowercase.',
            **kwargs,
        )


class CriticalChunkType(UnsuitableChunkType):
    position = 0
    ordinal = '1st'
    marks = 'critical'
    wanted = 'non-critical'


class PublicChunkType(UnsuitableChunkType):
    position = 1
    ordinal = '2nd'
    marks = 'public'
    wanted = 'private'


class UnsafeToCopyChunkType(UnsuitableChunkType):
    position = 3
    ordinal = '4th'
    marks = 'unsafe to copy'
    wanted = 'safe to copy'
