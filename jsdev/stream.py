import itertools

from .exceptions import WriteError
from .log import get_logger

logger = get_logger(__name__)

_EMPTY = object()


class CharStream:
    """
    Character-at-a-time reader over an iterable of text chunks, paired with
    the output it echoes to.

    Any iterable of strings works as input: a file object, a list of
    lines, or a single string. End of input is signalled by None.
    """

    def __init__(self, f_obj, out):
        self._chars = itertools.chain.from_iterable(f_obj)
        self.out = out
        self.line_no = 1
        self.cr = False
        self._preview = _EMPTY
        self._counted = False

    def _read(self):
        try:
            return next(self._chars, None)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Read error on line %d, stopping: %s",
                           self.line_no, exc)
            self._chars = iter(())
            return None

    def _count(self, c):
        if c == "\r":
            self.cr = True
            self.line_no += 1
        else:
            if c == "\n" and not self.cr:
                self.line_no += 1
            self.cr = False

    def peek(self):
        if self._preview is _EMPTY:
            self._preview = self._read()
            self._counted = False
        return self._preview

    def get(self, echo=False):
        """
        Consume and return the next character, or None at end of input.
        If echo is set the character is also written to the output.
        """
        if self._preview is _EMPTY:
            c = self._read()
            counted = False
        else:
            c = self._preview
            counted = self._counted
            self._preview = _EMPTY
        if c is None:
            return None
        if not counted:
            self._count(c)
        if echo:
            self.emit(c)
        return c

    def pushback(self, c):
        # The character was already counted when it was first read.
        self._preview = c
        self._counted = True

    def emit(self, text):
        try:
            self.out.write(text)
        except OSError as exc:
            raise WriteError(self.line_no) from exc
