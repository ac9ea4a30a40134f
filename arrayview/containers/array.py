from types import SimpleNamespace

from arrayview.containers.base import View, ViewOps, view_op
from arrayview.containers.strided import strided_class
from arrayview.errors import DimensionMismatchError
from arrayview.utils.array import calculate_slice
from arrayview.utils.memory import write


class ArrayView(View):
  """Array view"""

  def check_buffer(self, arr):
    if arr.ndim != 1:
      raise DimensionMismatchError(f"expected one dimension but got {arr.ndim}")
    if arr.strides[0] != arr.itemsize:
      raise DimensionMismatchError(f"expected stride of {arr.itemsize} but got {arr.strides[0]}")

  def __getitem__(self, key):
    if isinstance(key, slice):
      start, stop, step = calculate_slice(key.start, key.stop, key.step, len(self))
      # a non-unit step needs an explicit stride, so the result is a strided view
      cls = self.__class__ if step == 1 else strided_class(1, self.mutable)
      op_info = SimpleNamespace(operator=ViewOps.SLICE, operands={"A": self},
                                args={"slices": {0: (start, stop, step)}, "cls": cls})
      return view_op(op_info)
    return self.item((key,))


class MutableArrayView(ArrayView):
  """Mutable array view"""
  mutable = True

  def __setitem__(self, key, value):
    write(self.memory, self.offset((key,)), self.dtype, value)
