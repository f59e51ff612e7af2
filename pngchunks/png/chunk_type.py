'''
The type of a chunk is a sequence of 4 bytes, each of them an ASCII letter.

The case of each letter (i.e. the bit 5 of the byte) carries a property
of the chunk

 1. critical (uppercase) or ancillary (lowercase)
 2. public (uppercase) or private (lowercase)
 3. reserved, must be uppercase in the current version of the format
 4. unsafe to copy (uppercase) or safe to copy (lowercase)

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
import logging

from bitstring import Bits

from ..enum import ChunkProperty
from ..exceptions import (
    InvalidCharacter,
    InvalidLength,
    ReservedBitInvalid,
    CriticalChunkType,
    PublicChunkType,
    UnsafeToCopyChunkType,
)


logger = logging.getLogger(__name__)

# order of the properties follows the position of the letter
PROPERTIES = (
    ChunkProperty.ANCILLARY,
    ChunkProperty.PRIVATE,
    ChunkProperty.RESERVED,
    ChunkProperty.SAFE_TO_COPY,
)


def find_invalid_character(raw):
    '''Returns the first byte that is not an ASCII letter as a tuple (character, position)
    or None if all of them are fine.'''
    for position in range(len(raw)):
        if not raw[position:position + 1].isalpha():
            return chr(raw[position]), position

    return None


class ChunkType(object):
    LENGTH = 4

    def __init__(self, raw, text=None):
        '''The optional text is what the bytes have been encoded from,
        used in the error messages.'''
        raw = bytes(raw)
        self.check(raw, text)

        self._raw = raw
        self._bits = Bits(raw)

    @classmethod
    def from_bytes(cls, raw):
        return cls(raw)

    @classmethod
    def from_str(cls, value):
        return cls(value.encode('utf-8'), text=value)

    @classmethod
    def coerce(cls, value):
        '''Build a ChunkType from its text, its bytes or another ChunkType.'''
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            return cls.from_str(value)

        return cls(value)

    @classmethod
    def check(cls, raw, text=None):
        '''The only point where the bytes of a chunk type are checked to be letters
        and to be the right number.'''
        value = text if text is not None else raw.decode('latin1')

        invalid = find_invalid_character(raw)
        if invalid:
            char, position = invalid
            raise InvalidCharacter(value, char, position)

        if len(raw) != cls.LENGTH:
            raise InvalidLength(value)

    @property
    def raw(self):
        return self._raw

    def __bytes__(self):
        return self._raw

    def __str__(self):
        return self._raw.decode('ascii')

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self)

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def _is_lowercase(self, index):
        # the case bit is the third one starting from the most significant
        return self._bits[index * 8 + 2]

    def is_critical(self):
        return not self._is_lowercase(0)

    def is_public(self):
        return not self._is_lowercase(1)

    def is_reserved_bit_valid(self):
        return not self._is_lowercase(2)

    def is_safe_to_copy(self):
        return self._is_lowercase(3)

    @property
    def properties(self):
        flags = ChunkProperty.NONE
        for index, flag in enumerate(PROPERTIES):
            if self._is_lowercase(index):
                flags |= flag

        return flags

    def validate(self):
        '''Checks the chunk type is valid according to the PNG spec.'''
        self.check(self._raw)

        if not self.is_reserved_bit_valid():
            raise ReservedBitInvalid(str(self))

    def suitability_problems(self):
        '''Returns the list of errors, one for each rule violated by this chunk type
        for storing a hidden message (it must be ancillary, private and safe to copy).'''
        problems = []

        if self.is_critical():
            problems.append(CriticalChunkType(str(self)))

        if self.is_public():
            problems.append(PublicChunkType(str(self)))

        if not self.is_safe_to_copy():
            problems.append(UnsafeToCopyChunkType(str(self)))

        return problems

    def check_suitable_for_message(self):
        '''Checks if the chunk type is appropriate for storing hidden messages'''
        self.validate()

        problems = self.suitability_problems()
        if problems:
            logger.debug('chunk type %s is not suitable: %d problem(s)' % (self, len(problems)))
            raise problems[0]
