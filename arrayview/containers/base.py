import operator
from enum import Enum

import numpy as np

from arrayview.env import DEBUG
from arrayview.errors import OutOfRangeError
from arrayview.utils.array import calculate_contiguity, flatten_bytes
from arrayview.utils.math import ceildiv
from arrayview.utils.memory import address_of, read, region, request
from arrayview.utils.misc import viewstat

ViewOps = Enum("ViewOps", ["SLICE", "INDEX", "TRANSPOSE", "FLIP", "BROADCAST"])


def view_op(op_info):
  x = op_info.operands["A"]
  cls = op_info.args.get("cls", x.__class__)
  inst = object.__new__(cls)
  inst.__dict__.update(x.__dict__)
  data, size, stride = x.data, list(x.size), list(x.stride)
  if op_info.operator == ViewOps.SLICE:
    for axis, (start, stop, step) in op_info.args["slices"].items():
      size[axis] = ceildiv(stop - start, abs(step))
      if size[axis]:
        data += stride[axis] * (start if step > 0 else stop - 1)
      stride[axis] *= step
  elif op_info.operator == ViewOps.INDEX:
    data += stride[0] * op_info.args["index"]
    size, stride = size[1:], stride[1:]
  elif op_info.operator == ViewOps.TRANSPOSE:
    a, b = op_info.args["dimensions"]
    size[a], size[b] = size[b], size[a]
    stride[a], stride[b] = stride[b], stride[a]
  elif op_info.operator == ViewOps.FLIP:
    axis = op_info.args["dimension"]
    if size[axis]:
      data += (size[axis] - 1) * stride[axis]
    stride[axis] = -stride[axis]
  elif op_info.operator == ViewOps.BROADCAST:
    axis = op_info.args["dimension"]
    size[axis], stride[axis] = op_info.args["size"], 0
  inst.data, inst.size, inst.stride = data, tuple(size), tuple(stride)
  inst.c_contiguous, inst.f_contiguous = calculate_contiguity(inst.size, inst.stride, inst.itemsize)
  viewstat.log(op_info.operator, inst)
  if DEBUG:
    print(f"[VIEW] {op_info.operator.name} {x.__class__.__name__}{x.size} args={op_info.args}")
  if DEBUG > 1:
    print(f"[VIEW] -> {inst}")
  return inst


class View:
  dimensions = 1
  mutable = False

  def __init__(self, buffer=None):
    self.obj, self.data = None, 0
    self.memory = np.empty(0, dtype=np.uint8)
    self.dtype = np.dtype(np.uint8)
    self.size = (0,) * self.dimensions
    self.stride = (0,) * self.dimensions
    if buffer is not None:
      arr = request(buffer, writable=self.mutable)
      self.check_buffer(arr)
      self.memory, self.data = region(arr)
      self.obj, self.dtype = buffer, arr.dtype
      self.size, self.stride = tuple(arr.shape), tuple(arr.strides)
    # meta infos (https://numpy.org/doc/stable/dev/internals.html#numpy-internals)
    self.c_contiguous, self.f_contiguous = calculate_contiguity(self.size, self.stride, self.itemsize)

  def __repr__(self):
    return (f"<{self.__class__.__name__} dtype={self.dtype} size={self.size} stride={self.stride}>")

  def __len__(self):
    return self.size[0]

  def __bytes__(self):
    return flatten_bytes(self.memory, self.data, self.size, self.stride, self.itemsize)

  @property
  def itemsize(self):
    return self.dtype.itemsize

  @property
  def __array_interface__(self):
    return {"version": 3, "shape": self.size, "strides": self.stride, "typestr": self.dtype.str,
            "descr": self.dtype.descr, "data": (address_of(self.memory) + self.data, not self.mutable)}

  def numpy(self):
    return np.asarray(self)

  def check_buffer(self, arr):
    raise NotImplementedError

  def normalize_index(self, i, axis=0):
    i = operator.index(i)
    n = self.size[axis]
    k = i + n if i < 0 else i
    if not 0 <= k < n:
      raise OutOfRangeError(f"index {i} out of range for {n} elements")
    return k

  def offset(self, key):
    # all axes are checked before the offset is computed
    index = [self.normalize_index(k, axis) for axis, k in enumerate(key)]
    return self.data + sum(i * s for i, s in zip(index, self.stride))

  def item(self, key):
    return read(self.memory, self.offset(key), self.dtype)
