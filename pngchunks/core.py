"""
Core module for the abstraction of a binary structure

"""
from typing import Tuple, List

from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import PngChunksException


class Chunk(metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: a Chunk is
    an ordered list of fields, declared as class attributes.

        class TLV(Chunk):
            type   = fields.StructField('I')
            length = fields.StructField('I')
            data   = fields.StringField(Dependency('.length'))

    An instance is built either from values, passing them as keyword arguments
    (the fields derived from other fields are updated), or from binary data
    via unpack(). The values are accessible, read-only, as attributes.
    """

    def __init__(self, **kwargs):
        fields_name = self.get_ordered_fields_name()
        unknown = [_ for _ in kwargs if _ not in fields_name]
        if unknown:
            raise TypeError(f'{self.__class__.__name__} has no field named {", ".join(unknown)}')

        values = {}
        for field_name, field in self.get_fields():
            values[field_name] = kwargs[field_name] if field_name in kwargs else field.value_from_default()

        for _, field in self.get_fields():
            field.update(values)

        self._values = values

    @classmethod
    def get_ordered_fields_name(cls) -> List[str]:
        return cls._meta.fields

    @classmethod
    def get_field(cls, name) -> Field:
        if name not in cls._meta.fields:
            raise AttributeError(f'{cls.__name__} has no field named \'{name}\'')

        return getattr(cls, name)

    @classmethod
    def get_fields(cls) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, field) for each field.'''
        return [(_, getattr(cls, _)) for _ in cls.get_ordered_fields_name()]

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            msg.append('%s=%s' % (field_name, field.format(self._values[field_name])))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for field_name, field in self.get_fields():
            msg += '%s: %s\n' % (field_name, field.format(self._values[field_name]))
        return msg

    @property
    def size(self):
        '''the size is derived from the fields'''
        size = 0
        for field_name, field in self.get_fields():
            size += field.size_of(self._values[field_name])

        return size

    @property
    def raw(self):
        return self.pack()

    @property
    def layout(self):
        '''Offset and size of each field, relative to the start of the chunk.'''
        result = {}
        offset = 0
        for field_name, field in self.get_fields():
            size = field.size_of(self._values[field_name])
            result[field_name] = (offset, size)
            offset += size

        return result

    def pack(self) -> bytes:
        '''Encode the values into binary data, field after field.'''
        value = b''
        for field_name, field in self.get_fields():
            field_raw = field.pack(self._values[field_name])
            self.logger.debug('packing %s.%s (%d bytes)' % (self.__class__.__name__, field_name, len(field_raw)))
            value += field_raw

        return value

    def validate(self):
        '''Called after unpacking, each field can check the values are consistent.'''
        for _, field in self.get_fields():
            field.verify(self._values)

    @classmethod
    def unpack(cls, stream):
        '''This is one of the main APIs to take care of: its aim is to take a binary
        data and transform in the representation given by the class this method
        is implemented.

        The fields are read in order from the actual offset of the stream, any error
        is re-raised with the name of the field prepended to its chain.
        '''
        values = {}
        for field_name, field in cls.get_fields():
            cls.logger.debug('unpacking %s.%s at offset %d' % (cls.__name__, field_name, stream.tell()))
            try:
                values[field_name] = field.unpack(stream, values)
            except PngChunksException as e:
                e.chain.insert(0, field_name)
                raise

        instance = cls.__new__(cls)
        instance._values = values
        instance.validate()

        return instance

    @classmethod
    def from_bytes(cls, data):
        with Stream(data) as stream:
            return cls.unpack(stream)
