"""
.. autoclass:: FileReader
    :members:
"""

from typing import Iterator, Tuple


class FileReader:
    """
    A very thin wrapper around file (or ``IO``-alike object), to read it line by line and:

    * strip lines transparently, skipping empty ones
    * ignore BOM (byte-order mark) at the beginning
    * yield line with its number (1-based)
    * support encoding change on the fly::

        for num, line in reader:
            # do something
            reader.reset_encoding('UTF-8')
            # ..continue to read from the same line

    Already opened ``IO`` objects (like ``io.StringIO``) are read as is, and ignore encoding changes.
    """

    def __init__(self, path, encoding='Windows-1252'):
        self.line_no = 0

        if hasattr(path, 'readline'):
            self.path = None
            self.reset_io(path)
        else:
            self.path = path
            self.reset_io(self._open(path, encoding))

    def reset_encoding(self, encoding):
        if self.path is None:
            return
        self.io.close()
        self.reset_io(self._open(self.path, encoding))

    def __iter__(self):
        return self

    def __next__(self) -> Tuple[int, str]:
        return self.iter.__next__()

    def readlines(self) -> Iterator[Tuple[int, str]]:
        ln = self.io.readline()
        while ln != '':
            self.line_no += 1
            # BOM, as read in UTF-8 and in single-byte encodings
            if self.line_no == 1 and ln.startswith(('\ufeff', '\xef\xbb\xbf')):
                ln = ln.replace('\ufeff', '', 1).replace('\xef\xbb\xbf', '', 1)
            yield (self.line_no, ln.strip())
            ln = self.io.readline()

    def reset_io(self, obj):
        self.io = obj
        self.iter = filter(lambda l: l[1] != '', self.readlines())

        for _ in range(self.line_no):
            self.io.readline()

    def close(self):
        self.io.close()

    def _open(self, path, encoding):  # pylint: disable=no-self-use
        # errors='surrogateescape', because dictionaries in legacy encodings sometimes have
        # invalid single bytes as flags
        return open(path, 'r', encoding=encoding, errors='surrogateescape')
