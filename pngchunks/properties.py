import logging


logger = logging.getLogger(__name__)


class Dependency:
    '''This makes the relation between fields possible.

    In practice this class allows to write something like

        class Simple(Chunk):
            length = fields.StructField('I')
            data = fields.StringField(Dependency('.length'))

    and have the length of the string contained in the field named 'data'
    strictly connected to the field named 'length'.

    The relation is defined in one direction for unpacking (the value of
    'length' tells how many bytes to read) and is reversed when a structure
    is built from values (the size of 'data' is written back into 'length').

    The leading '.' indicates we refer to a field at the same level, it's
    the only kind of resolution supported.
    '''
    def __init__(self, expression):
        if not expression.startswith('.'):
            raise ValueError(f'dependency \'{expression}\' must refer to a sibling field (i.e. start with \'.\')')

        self.expression = expression

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.expression})>'

    @property
    def field_name(self):
        return self.expression[1:]

    def resolve(self, values):
        '''With this method we resolve the attribute with respect to the values
        of the sibling fields already unpacked.'''
        value = values[self.field_name]
        logger.debug(' resolved \'%s\' with value %s' % (self.expression, value))

        return value

    def resolve_and_set(self, values, value):
        logger.debug(' setting \'%s\' to %s' % (self.expression, value))
        values[self.field_name] = value
