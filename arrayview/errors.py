class ArrayViewError(Exception):
  pass

class InvalidSliceError(ArrayViewError, ValueError):
  pass

# NOTE: must stay an IndexError, the legacy iteration protocol stops on it
# https://docs.python.org/3/reference/datamodel.html#object.__getitem__
class OutOfRangeError(ArrayViewError, IndexError):
  pass

class InvalidAxisError(ArrayViewError, ValueError):
  pass

class InvalidBroadcastError(ArrayViewError, ValueError):
  pass

class DimensionMismatchError(ArrayViewError, BufferError):
  pass

class ReadOnlyError(ArrayViewError, BufferError):
  pass
