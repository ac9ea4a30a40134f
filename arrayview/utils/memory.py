import numpy as np

from arrayview.errors import ReadOnlyError


class ArrayInterface:
  """Exposes a raw address to numpy while holding a reference to `base`.

  numpy keeps the interface object alive as the array base, so the memory
  `base` owns outlives every array created from it.
  https://numpy.org/doc/stable/reference/arrays.interface.html
  """
  def __init__(self, base, address, nbytes, readonly):
    self.base = base
    self.__array_interface__ = {"version": 3, "shape": (nbytes,), "typestr": "|u1",
                                "data": (address, readonly)}

def address_of(arr):
  return arr.__array_interface__["data"][0]

def request(buffer, writable=False):
  mv = memoryview(buffer)
  if writable and mv.readonly:
    raise ReadOnlyError(f"buffer of {type(buffer).__name__} is not writable")
  return np.asarray(mv)

def span(size, stride, itemsize):
  # byte range [lo, hi) reachable from the first element
  lo = sum(min(0, (n-1) * s) for n, s in zip(size, stride))
  hi = sum(max(0, (n-1) * s) for n, s in zip(size, stride)) + itemsize
  return lo, hi

def region(arr):
  """Flat uint8 region covering every element of `arr`, and the offset of its first element."""
  if not arr.size:
    return np.empty(0, dtype=np.uint8), 0
  lo, hi = span(arr.shape, arr.strides, arr.itemsize)
  interface = ArrayInterface(arr, address_of(arr) + lo, hi - lo, not arr.flags.writeable)
  return np.asarray(interface), -lo

def in_bounds(nbytes, data, size, stride, itemsize):
  if not all(size):
    return True
  lo, hi = span(size, stride, itemsize)
  return data + lo >= 0 and data + hi <= nbytes

def read(memory, offset, dtype):
  return memory[offset:offset+dtype.itemsize].view(dtype)[0].item()

def write(memory, offset, dtype, value):
  memory[offset:offset+dtype.itemsize].view(dtype)[0] = value
