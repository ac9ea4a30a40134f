import operator

from arrayview.errors import InvalidSliceError
from arrayview.utils.math import prod


def calculate_contiguity(shape, strides, itemsize):
  # https://github.com/numpy/numpy/blob/93a97649aa0aefc0ee8ee5fc7cb78063bfe67255/numpy/core/src/multiarray/flagsobject.c#L115
  assert len(shape) == len(strides)
  ndim = len(shape)
  c_contiguous = f_contiguous = True
  if ndim:
    nbytes = itemsize
    for i in range(ndim-1, -1, -1):
      if shape[i] == 0:
        return True, True
      if shape[i] != 1:
        if strides[i] != nbytes:
          c_contiguous = False
        nbytes *= shape[i]
    nbytes = itemsize
    for i in range(ndim):
      if shape[i] != 1:
        if strides[i] != nbytes:
          f_contiguous = False
        nbytes *= shape[i]
  return c_contiguous, f_contiguous

def calculate_slice(start, stop, step, length):
  # https://github.com/python/cpython/blob/d034590294d4618880375a6db513c30bce3e126b/Objects/sliceobject.c#L264
  start, stop, step = (None if x is None else operator.index(x) for x in (start, stop, step))
  if step is None: step = 1
  if step == 0: raise InvalidSliceError("slice step cannot be zero")
  if start is None: start = length+1 if step < 0 else 0
  if stop is None: stop = -length-1 if step < 0 else length+1

  if start < 0:
    start += length
    if start < 0: start = -1 if step < 0 else 0
  elif start >= length:
    start = length-1 if step < 0 else length
  if stop < 0:
    stop += length
    if stop < 0: stop = -1 if step < 0 else 0
  elif stop >= length:
    stop = length-1 if step < 0 else length

  if step < 0 and stop < start:
    # walking [stop+1, start+1) backwards visits the same elements
    start, stop = stop + 1, start + 1
  elif not (step > 0 and start < stop):
    start = stop = min(max(start, 0), length)
  return start, stop, step

def flatten_bytes(memory, data, size, stride, itemsize):
  nbytes = prod(size) * itemsize
  if not nbytes:
    return b""
  c_contiguous, _ = calculate_contiguity(size, stride, itemsize)
  if c_contiguous:
    return memory[data:data+nbytes].tobytes()

  out = bytearray(nbytes)
  pos = 0
  def flatten(data, size, stride):
    nonlocal pos
    if len(size) == 1:
      for i in range(size[0]):
        offset = data + i * stride[0]
        out[pos:pos+itemsize] = memory[offset:offset+itemsize].tobytes()
        pos += itemsize
      return
    for i in range(size[0]):
      flatten(data + i * stride[0], size[1:], stride[1:])

  flatten(data, tuple(size), tuple(stride))
  return bytes(out)
