import operator
from types import SimpleNamespace

import numpy as np

from arrayview.containers.base import View, ViewOps, view_op
from arrayview.errors import DimensionMismatchError, InvalidAxisError, InvalidBroadcastError
from arrayview.utils.array import calculate_contiguity, calculate_slice
from arrayview.utils.memory import in_bounds, region, request, write

_classes = {}

def strided_class(dimensions, mutable=False):
  return _classes[(dimensions, mutable)]


class StridedArrayView(View):
  """Array view with a size and a signed byte stride in each dimension.

  A zero stride repeats the same element along a dimension (see
  `broadcasted()`), so distinct indices are not guaranteed to address
  distinct memory.
  """
  dimensions = None

  def __init__(self, buffer=None):
    if self.dimensions is None:
      raise TypeError(f"{self.__class__.__name__} has no dimension count, use StridedArrayView1D, 2D or 3D")
    super().__init__(buffer)

  def __init_subclass__(cls, **kwargs):
    super().__init_subclass__(**kwargs)
    if cls.dimensions is not None:
      _classes[(cls.dimensions, cls.mutable)] = cls

  def check_buffer(self, arr):
    if arr.ndim != self.dimensions:
      raise DimensionMismatchError(f"expected {self.dimensions} dimensions but got {arr.ndim}")

  @classmethod
  def from_buffer(cls, buffer, size, stride, dtype=None):
    """View a contiguous one-dimensional `buffer` with an explicit size and stride."""
    arr = request(buffer, writable=cls.mutable)
    if arr.ndim != 1 or not arr.flags.c_contiguous:
      raise DimensionMismatchError(f"expected a contiguous one-dimensional buffer but got {arr.ndim} "
                                   f"dimensions with stride {arr.strides}")
    size, stride = tuple(operator.index(s) for s in size), tuple(operator.index(s) for s in stride)
    if len(size) != cls.dimensions or len(stride) != cls.dimensions:
      raise DimensionMismatchError(f"expected {cls.dimensions} dimensions but got size {size} and stride {stride}")
    if any(s < 0 for s in size):
      raise DimensionMismatchError(f"expected a non-negative size but got {size}")
    dtype = arr.dtype if dtype is None else np.dtype(dtype)
    memory, data = region(arr)
    if not in_bounds(memory.size, data, size, stride, dtype.itemsize):
      raise DimensionMismatchError(f"data size {memory.size} is not enough for {size} elements "
                                   f"of stride {stride} and item size {dtype.itemsize}")
    inst = cls()
    inst.obj, inst.memory, inst.data, inst.dtype = buffer, memory, data, dtype
    inst.size, inst.stride = size, stride
    inst.c_contiguous, inst.f_contiguous = calculate_contiguity(size, stride, dtype.itemsize)
    return inst

  def is_element_key(self, key):
    return len(key) == self.dimensions and not any(isinstance(k, slice) for k in key)

  def __getitem__(self, key):
    if isinstance(key, slice):
      slices = {0: calculate_slice(key.start, key.stop, key.step, self.size[0])}
      op_info = SimpleNamespace(operator=ViewOps.SLICE, operands={"A": self}, args={"slices": slices})
      return view_op(op_info)
    if isinstance(key, tuple):
      if len(key) == self.dimensions and all(isinstance(k, slice) for k in key):
        slices = {i: calculate_slice(k.start, k.stop, k.step, self.size[i]) for i, k in enumerate(key)}
        op_info = SimpleNamespace(operator=ViewOps.SLICE, operands={"A": self}, args={"slices": slices})
        return view_op(op_info)
      if self.is_element_key(key):
        return self.item(key)
      raise TypeError(f"expected {self.dimensions} indices or {self.dimensions} slices but got {key}")
    if self.dimensions == 1:
      return self.item((key,))
    i = self.normalize_index(key)
    cls = strided_class(self.dimensions - 1, self.mutable)
    op_info = SimpleNamespace(operator=ViewOps.INDEX, operands={"A": self}, args={"index": i, "cls": cls})
    return view_op(op_info)

  def transposed(self, a, b):
    a, b = operator.index(a), operator.index(b)
    if a == b or not (0 <= a < self.dimensions and 0 <= b < self.dimensions):
      raise InvalidAxisError(f"dimensions {a}, {b} can't be transposed in a {self.dimensions}D view")
    op_info = SimpleNamespace(operator=ViewOps.TRANSPOSE, operands={"A": self}, args={"dimensions": (a, b)})
    return view_op(op_info)

  def check_dimension(self, dimension):
    dimension = operator.index(dimension)
    if not 0 <= dimension < self.dimensions:
      raise InvalidAxisError(f"dimension {dimension} out of range for a {self.dimensions}D view")
    return dimension

  def flipped(self, dimension):
    dimension = self.check_dimension(dimension)
    op_info = SimpleNamespace(operator=ViewOps.FLIP, operands={"A": self}, args={"dimension": dimension})
    return view_op(op_info)

  def broadcasted(self, dimension, size):
    dimension, size = self.check_dimension(dimension), operator.index(size)
    if self.size[dimension] != 1:
      raise InvalidBroadcastError(f"can't broadcast dimension {dimension} with {self.size[dimension]} elements")
    if size < 0:
      raise InvalidBroadcastError(f"can't broadcast dimension {dimension} to {size} elements")
    op_info = SimpleNamespace(operator=ViewOps.BROADCAST, operands={"A": self},
                              args={"dimension": dimension, "size": size})
    return view_op(op_info)


class MutableStridedArrayView(StridedArrayView):
  mutable = True

  def __setitem__(self, key, value):
    key = key if isinstance(key, tuple) else (key,)
    if not self.is_element_key(key):
      raise TypeError(f"expected {self.dimensions} indices but got {key}")
    write(self.memory, self.offset(key), self.dtype, value)


class StridedArrayView1D(StridedArrayView):
  """One-dimensional array view with stride information"""
  dimensions = 1

class StridedArrayView2D(StridedArrayView):
  """Two-dimensional array view with stride information"""
  dimensions = 2

class StridedArrayView3D(StridedArrayView):
  """Three-dimensional array view with stride information"""
  dimensions = 3

class MutableStridedArrayView1D(MutableStridedArrayView):
  """Mutable one-dimensional array view with stride information"""
  dimensions = 1

class MutableStridedArrayView2D(MutableStridedArrayView):
  """Mutable two-dimensional array view with stride information"""
  dimensions = 2

class MutableStridedArrayView3D(MutableStridedArrayView):
  """Mutable three-dimensional array view with stride information"""
  dimensions = 3
