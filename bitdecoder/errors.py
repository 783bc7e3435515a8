"""
Exceptions raised while decoding a bit stream.

Every failure is detected at the smallest unit (a single bit read or the
byte pull behind it) and propagates unchanged to the caller:

- EndOfStreamError: the source ran out before the requested bits arrived
- InvalidArgumentError: a width or count outside the permitted range

Both subclass the builtin exception a caller would expect (EOFError and
ValueError), so existing handlers keep working.

Nothing is rolled back on failure. Bits consumed before the error stay
consumed and the reader's bit_position reflects them.
"""


class BitReaderError(Exception):
    """Base class for recoverable decoding errors."""


class EndOfStreamError(BitReaderError, EOFError):
    """Source exhausted before the requested bits or bytes were available."""


class InvalidArgumentError(BitReaderError, ValueError):
    """Requested width or count outside the permitted range."""


class ReaderAbort(RuntimeError):
    """
    Unrecoverable decoding failure raised by unwrap().

    Not a BitReaderError: handlers for EndOfStreamError or
    InvalidArgumentError do not catch it.
    """


def unwrap(operation, *args, **kwargs):
    """
    Run a read operation, converting any decoding error into ReaderAbort.

    This is the unwrap-or-crash calling convention for callers that
    guarantee sufficient input. It never substitutes a default value.

    Args:
        operation: Any callable from this package, e.g. read_u16
        *args: Positional arguments, normally the reader first
        **kwargs: Keyword arguments passed through

    Returns:
        Whatever the operation returns

    Raises:
        ReaderAbort: If the operation raised a BitReaderError
    """
    try:
        return operation(*args, **kwargs)
    except BitReaderError as e:
        name = getattr(operation, "__name__", repr(operation))
        raise ReaderAbort(f"{name} failed: {e}") from e
