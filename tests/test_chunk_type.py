import pytest

from pngchunks.enum import ChunkProperty
from pngchunks.exceptions import (
    ChunkTypeException,
    InvalidCharacter,
    InvalidLength,
    ReservedBitInvalid,
    UnsuitableChunkType,
    CriticalChunkType,
    PublicChunkType,
    UnsafeToCopyChunkType,
)
from pngchunks.png.chunk_type import ChunkType, find_invalid_character


def test_chunk_type_from_bytes():
    chunk_type = ChunkType(bytes([82, 117, 83, 116]))

    assert chunk_type.raw == b'RuSt'
    assert bytes(chunk_type) == b'RuSt'


def test_chunk_type_from_str():
    assert ChunkType.from_str('RuSt') == ChunkType(bytes([82, 117, 83, 116]))
    assert str(ChunkType.from_str('RuSt')) == 'RuSt'


def test_chunk_type_equality_is_bytewise():
    assert ChunkType.from_str('RuSt') != ChunkType.from_str('RUSt')
    assert ChunkType.from_str('RuSt') != 'RuSt'
    assert len({ChunkType(b'RuSt'), ChunkType.from_str('RuSt')}) == 1


def test_chunk_type_coerce():
    chunk_type = ChunkType.from_str('ruSt')

    assert ChunkType.coerce(chunk_type) is chunk_type
    assert ChunkType.coerce('ruSt') == chunk_type
    assert ChunkType.coerce(b'ruSt') == chunk_type


def test_chunk_type_properties():
    chunk_type = ChunkType.from_str('RuSt')

    assert chunk_type.is_critical()
    assert not chunk_type.is_public()
    assert chunk_type.is_reserved_bit_valid()
    assert chunk_type.is_safe_to_copy()
    assert chunk_type.properties == ChunkProperty.PRIVATE | ChunkProperty.SAFE_TO_COPY


@pytest.mark.parametrize('raw', [b'ruSt', bytearray(b'ruSt'), memoryview(b'ruSt')])
def test_chunk_type_properties_from_buffer(raw):
    chunk_type = ChunkType(raw)

    assert not chunk_type.is_critical()
    assert not chunk_type.is_public()
    assert chunk_type.is_reserved_bit_valid()
    assert chunk_type.is_safe_to_copy()
    assert chunk_type.properties == (
        ChunkProperty.ANCILLARY | ChunkProperty.PRIVATE | ChunkProperty.SAFE_TO_COPY
    )


def test_chunk_type_is_not_critical():
    assert not ChunkType.from_str('ruSt').is_critical()


def test_chunk_type_is_public():
    assert ChunkType.from_str('RUSt').is_public()


def test_chunk_type_is_unsafe_to_copy():
    assert not ChunkType.from_str('RuST').is_safe_to_copy()


def test_chunk_type_standard_types():
    assert ChunkType(b'IEND').properties == ChunkProperty.NONE
    assert ChunkType(b'tEXt').properties == ChunkProperty.ANCILLARY | ChunkProperty.SAFE_TO_COPY


def test_valid_chunk_is_valid():
    ChunkType.from_str('RuSt').validate()


def test_reserved_bit_invalid():
    """The parsing is fine, the validation is not."""
    chunk_type = ChunkType.from_str('Rust')

    assert not chunk_type.is_reserved_bit_valid()

    with pytest.raises(ReservedBitInvalid) as exc_info:
        chunk_type.validate()

    assert exc_info.value.value == 'Rust'
    assert '3rd letter' in str(exc_info.value)


def test_invalid_character():
    with pytest.raises(InvalidCharacter) as exc_info:
        ChunkType.from_str('Ru1t')

    assert exc_info.value.char == '1'
    assert exc_info.value.position == 2
    assert 'position 2' in str(exc_info.value)


def test_invalid_character_keeps_the_text():
    """The error shows the text as written, not its encoded bytes"""
    with pytest.raises(InvalidCharacter) as exc_info:
        ChunkType.from_str('ruS\u00e9')

    assert exc_info.value.value == 'ruS\u00e9'
    assert exc_info.value.position == 3
    assert '"ruS\u00e9"' in str(exc_info.value)


def test_invalid_character_from_bytes():
    """Both constructors check the characters"""
    with pytest.raises(InvalidCharacter) as exc_info:
        ChunkType(b'Ru\x00t')

    assert exc_info.value.position == 2


def test_invalid_character_before_length():
    with pytest.raises(InvalidCharacter) as exc_info:
        ChunkType.from_str('R1')

    assert exc_info.value.position == 1


@pytest.mark.parametrize('value', ['Ru', '', 'RuStRuSt'])
def test_invalid_length(value):
    with pytest.raises(InvalidLength):
        ChunkType.from_str(value)


def test_errors_are_chunk_type_exceptions():
    for exc in (InvalidLength, InvalidCharacter, ReservedBitInvalid, UnsuitableChunkType):
        assert issubclass(exc, ChunkTypeException)


def test_find_invalid_character():
    assert find_invalid_character(b'aBcD') is None
    assert find_invalid_character(b'a-c_') == ('-', 1)


def test_suitable_for_message():
    chunk_type = ChunkType.from_str('ruSt')

    chunk_type.check_suitable_for_message()
    assert chunk_type.suitability_problems() == []


@pytest.mark.parametrize('value,exc', [
    ('RuSt', CriticalChunkType),
    ('rUSt', PublicChunkType),
    ('ruST', UnsafeToCopyChunkType),
])
def test_not_suitable_for_message(value, exc):
    with pytest.raises(exc) as exc_info:
        ChunkType.from_str(value).check_suitable_for_message()

    assert isinstance(exc_info.value, UnsuitableChunkType)
    assert exc_info.value.value == value
    assert 'change it to be lowercase' in str(exc_info.value)


def test_suitability_problems_lists_every_rule():
    problems = ChunkType.from_str('RUST').suitability_problems()

    assert [type(_) for _ in problems] == [CriticalChunkType, PublicChunkType, UnsafeToCopyChunkType]
    assert [_.position for _ in problems] == [0, 1, 3]


def test_suitability_requires_validity():
    with pytest.raises(ReservedBitInvalid):
        ChunkType.from_str('rust').check_suitable_for_message()
