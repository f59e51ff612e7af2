"""
# Pngchunks: hide messages into the chunks of PNG images.

A PNG file is a signature followed by a list of chunks, each one made
of a length, a type, some data and a CRC; the data of the chunks whose type
is ancillary, private and safe to copy is ignored by decoders, so it can
carry whatever we want without corrupting the image.

The binary structures are described declaratively: a Chunk is an ordered
list of fields, the two basic operations defined for them are

 1. unpack(): read the binary data from a stream and build a high-level
    representation of it; each field knows how many bytes it needs to read,
    possibly depending on the value of a field read before (see Dependency).

 2. pack(): encode the high-level representation into binary data.

Any malformed input makes unpack() raise an exception from the ones defined
in pngchunks.exceptions, each one with a chain indicating where in the
structure the problem has been found.
"""
