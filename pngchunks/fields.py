"""
A Field is "fundamental" datatype from the format point of view: it knows how
many bytes it takes, how to read its value from a stream and how to encode it
back into bytes.

Fields don't hold values: the values live into the Chunk instance the fields
are declared in, a field receives the values of its siblings when it needs
them (see Dependency).
"""
import logging
import struct

from .meta import FieldBase, Endianess
from .properties import Dependency
from .exceptions import InvalidSignature, PngChunksException


logger = logging.getLogger(__name__)


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, default=None, endianess=Endianess.LITTLE_ENDIAN, formatter=None):
        super().__init__()
        self.name = None
        self.owner = None
        self.default = default
        self.endianess = endianess
        self.formatter = formatter

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.name)

    def value_from_default(self):
        return self.default

    def get_value(self, value):
        '''What is returned accessing the field from a Chunk instance.'''
        return value

    def format(self, value):
        if self.formatter:
            return self.formatter % value

        return repr(value)

    def get_dependencies(self):
        """Return the dictionary containing as key the attribute name"""
        instance_dict = self.__dict__
        return {_k: _v for _k, _v in instance_dict.items() if isinstance(_v, Dependency)}

    def size_of(self, value) -> int:
        raise NotImplementedError(f"method {self.__class__.__name__}.size_of() not implemented")

    def update(self, values):
        '''This is used to update the values derived from this field before packing'''
        pass

    def verify(self, values):
        '''This is used to check the consistency of the values after unpacking'''
        pass

    def pack(self, value) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}.pack() not implemented")

    def unpack(self, stream, values):
        raise NotImplementedError(f"method {self.__class__.__name__}.unpack() not implemented")


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """

    # struct's byte order characters
    BYTE_ORDERS = {
        Endianess.LITTLE_ENDIAN: '<',
        Endianess.BIG_ENDIAN: '>',
        Endianess.NETWORK: '!',
        Endianess.NATIVE: '=',
    }

    def __init__(self, struct_format, default=0, **kw):
        self.struct_format = struct_format
        super().__init__(default=default, **kw)

    def get_format(self):
        return '%s%s' % (self.BYTE_ORDERS[self.endianess], self.struct_format)

    def size_of(self, value=None):
        return struct.calcsize(self.get_format())

    def pack(self, value):
        try:
            return struct.pack(self.get_format(), value)
        except struct.error as e:
            raise ValueError(f'value {value!r} cannot be packed into field \'{self.name}\' ({self.get_format()})') from e

    def unpack(self, stream, values):
        raw = stream.read_exact(self.size_of(), what=self.name)

        return struct.unpack(self.get_format(), raw)[0]


class StringField(Field):
    """Represent a contiguous chunk of bytes.

    The number of bytes can be fixed or given by a Dependency; with
    is_magic=True the bytes read must be equal to the default."""

    def __init__(self, n=None, is_magic=False, **kw):
        if n is None and kw.get('default') is None:
            raise ValueError("StringField must have 'n' or 'default' indicated!")

        if n is not None and not isinstance(n, (int, Dependency)):
            raise ValueError('n is \'%s\' must be of the right type' % n.__class__.__name__)

        self.length = n if n is not None else len(kw['default'])
        self.is_magic = is_magic

        super().__init__(**kw)

    def format(self, value):
        if len(value) > 0x10:
            return '<%d bytes>' % len(value)

        return repr(value)

    def value_from_default(self):
        if self.default is not None:
            return self.default

        return b'\x00' * self.length if isinstance(self.length, int) else b''

    def get_length(self, values):
        if isinstance(self.length, Dependency):
            return self.length.resolve(values)

        return self.length

    def size_of(self, value):
        return len(value)

    def update(self, values):
        """The StringField has the size as a parameter and we must follow that indication
        unless it's a Dependency, in that case we are going to write back the size where necessary."""
        length = len(values[self.name])

        if isinstance(self.length, Dependency):
            self.length.resolve_and_set(values, length)
        elif length != self.length:
            raise ValueError(f'field \'{self.name}\' has a value with the wrong size (that is {self.length} bytes)')

    def pack(self, value):
        return bytes(value)

    def unpack(self, stream, values):
        length = self.get_length(values)

        if self.is_magic:
            raw = stream.read(length)
            if raw != self.default:
                logger.warning('the magic doesn\'t correspond')
                raise InvalidSignature(raw, self.default)

            return raw

        return stream.read_exact(length, what=self.name)


class ChunkField(Field):
    """Embed a Chunk as a field of another Chunk."""

    def __init__(self, chunk_cls, **kw):
        self.chunk_cls = chunk_cls
        super().__init__(**kw)

    def value_from_default(self):
        return self.chunk_cls()

    def format(self, value):
        return repr(value)

    def size_of(self, value):
        return value.size

    def pack(self, value):
        return value.pack()

    def unpack(self, stream, values):
        return self.chunk_cls.unpack(stream)


class ArrayField(Field):
    '''Un/Pack an array of Chunks, reading elements until the stream is exhausted.

    Accessing the field from a Chunk instance returns a tuple: the
    list is owned by the instance and it's up to it to change it.
    '''

    def __init__(self, chunk_cls, **kw):
        self.chunk_cls = chunk_cls
        kw.setdefault('default', ())
        super().__init__(**kw)

    def value_from_default(self):
        return list(self.default)

    def get_value(self, value):
        return tuple(value)

    def format(self, value):
        return '[%s]' % ', '.join(repr(_) for _ in value)

    def size_of(self, value):
        return sum(element.size for element in value)

    def pack(self, value):
        return b''.join(element.pack() for element in value)

    def unpack(self, stream, values):
        elements = []

        while not stream.is_exhausted():
            logger.debug('unpacking %s[%d] at offset %d' % (self.name, len(elements), stream.tell()))
            try:
                elements.append(self.chunk_cls.unpack(stream))
            except PngChunksException as e:
                e.chain.insert(0, len(elements))
                raise

        return elements
