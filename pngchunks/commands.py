'''
The operations available from the command line: each one loads an image,
works on its chunks and, if necessary, writes it back.
'''
import logging
import sys

from .exceptions import PngChunksException
from .png import PNGFile, PNGChunk
from .png.chunk_type import ChunkType


logger = logging.getLogger(__name__)


def parse_chunk_type(value):
    chunk_type = ChunkType.from_str(value)
    chunk_type.validate()

    return chunk_type


def iter_removed(png, chunk_type):
    '''Remove the chunks with the given type one at a time, in order.'''
    while True:
        chunk = png.remove_first(chunk_type)
        if chunk is None:
            break

        yield chunk


def encode(path, chunk_type, message, output=None):
    '''Hides a message in an image by storing it in a non-critical chunk.

    The image is written to output, if indicated, otherwise it's overwritten.'''
    chunk_type = parse_chunk_type(chunk_type)
    chunk_type.check_suitable_for_message()

    png = PNGFile.from_file(path)
    png.append(PNGChunk(chunk_type, message.encode('utf-8')))

    destination = output or path
    png.save(destination)

    logger.debug('message of %d characters stored into %s at \'%s\'' % (len(message), chunk_type, destination))

    return destination


def decode(path, chunk_type):
    '''Returns the messages in the chunks of the given type and the number of
    these chunks that don't contain text. The file is not modified.'''
    chunk_type = parse_chunk_type(chunk_type)

    png = PNGFile.from_file(path)

    messages = []
    n_invalid = 0
    for chunk in iter_removed(png, chunk_type):
        try:
            messages.append(chunk.data_as_string())
        except UnicodeDecodeError:
            logger.warning('chunk %s of %d bytes doesn\'t contain text' % (chunk.type, chunk.length))
            n_invalid += 1

    return messages, n_invalid


def print_chunks(path):
    return str(PNGFile.from_file(path))


def remove(path, chunk_type):
    '''Removes all chunks of a specific chunk type, overwriting the file
    if at least one is found. Returns how many have been removed.'''
    chunk_type = parse_chunk_type(chunk_type)

    png = PNGFile.from_file(path)

    count = len(list(iter_removed(png, chunk_type)))

    if count:
        png.save(path)

    return count


def usage(progname):
    print(f'''usage: {progname} <command> [arguments]

 encode <file> <chunk type> <message> [output file]
     hides the message in a chunk of the given type; the chunk type is made of
     4 letters with cases [lowercase][lowercase][UPPERCASE][lowercase] (e.g. ruSt).
     If the output file is not indicated the image is overwritten.

 decode <file> <chunk type>
     prints the messages hidden in the chunks of the given type

 print <file>
     prints all the chunks of the image

 remove <file> <chunk type>
     removes all the chunks of the given type, overwriting the image''')
    sys.exit(1)


def run(command, args):
    if command == 'encode':
        encode(*args)
        print('Message successfully encoded')
    elif command == 'decode':
        path, chunk_type = args
        messages, n_invalid = decode(path, chunk_type)

        if messages:
            print('Messages:')
            print('\n'.join(messages))

        if n_invalid:
            print(f'\nUnable to read data from {n_invalid} chunk(s)')

        if not messages:
            print(f'No chunks with chunk type "{chunk_type}" found')
    elif command == 'print':
        print(print_chunks(*args))
    elif command == 'remove':
        path, chunk_type = args
        count = remove(path, chunk_type)

        if count:
            print(f'Number of chunks removed: {count}')
        else:
            print(f'No chunk with chunk type "{chunk_type}" found')


# number of arguments accepted by each command, as (min, max)
COMMANDS = {
    'encode': (3, 4),
    'decode': (2, 2),
    'print': (1, 1),
    'remove': (2, 2),
}


def main(argv):
    if len(argv) < 2 or argv[1] not in COMMANDS:
        usage(argv[0])

    command, args = argv[1], argv[2:]
    n_min, n_max = COMMANDS[command]
    if not n_min <= len(args) <= n_max:
        usage(argv[0])

    try:
        run(command, args)
    except (PngChunksException, OSError, UnicodeError) as e:
        logger.debug('command \'%s\' failed' % command, exc_info=True)
        print(f'Error: {e}')
        return 1

    return 0
