from enum import Flag


class ChunkProperty(Flag):
    '''Properties encoded in the case of each letter of a chunk type.

    The bit is set when the corresponding letter is lowercase.'''
    NONE              = 0
    ANCILLARY         = 1 << 0
    PRIVATE           = 1 << 1
    RESERVED          = 1 << 2
    SAFE_TO_COPY      = 1 << 3
