import runtime_path  # isort:skip

import numpy as np
import pytest

from arrayview import (ArrayView, DimensionMismatchError, MutableArrayView, MutableStridedArrayView1D,
                       OutOfRangeError, ReadOnlyError, StridedArrayView1D)

def meta(view):
  return view.size, view.stride, view.data

def test_default():
  a = ArrayView()
  assert len(a) == 0
  assert a.obj is None
  assert bytes(a) == b""
  assert list(a) == []
  with pytest.raises(OutOfRangeError):
    a[0]

def test_from_buffer():
  b = b"hello"
  a = ArrayView(b)
  assert len(a) == 5
  assert a.obj is b
  assert a.size == (5,) and a.stride == (1,)
  assert a[0] == ord("h")
  assert a[-1] == ord("o")
  assert bytes(a) == b"hello"

def test_index_out_of_range():
  a = ArrayView(b"abc")
  assert a[2] == ord("c")
  with pytest.raises(OutOfRangeError):
    a[3]
  with pytest.raises(IndexError):
    a[-4]

def test_iteration():
  assert list(ArrayView(b"hello")) == list(b"hello")
  assert [x for x in ArrayView(bytearray(b"ab"))] == [97, 98]

def test_typed_elements():
  nparr = np.array([1.5, 2.5, -4.0], dtype=np.float32)
  a = ArrayView(nparr)
  assert a.itemsize == 4
  assert a.stride == (4,)
  assert a[1] == 2.5
  assert bytes(a) == nparr.tobytes()
  assert np.array_equal(a.numpy(), nparr)

def test_slice_unit_step():
  a = ArrayView(b"hello")
  s = a[1:4]
  assert type(s) is ArrayView
  assert bytes(s) == b"ell"
  assert s.obj is a.obj
  assert meta(a[0:5:1]) == meta(a)
  assert meta(a[:]) == meta(a)
  assert len(a[4:1]) == 0

def test_slice_promotes_to_strided():
  a = ArrayView(b"hello")
  s = a[::2]
  assert type(s) is StridedArrayView1D
  assert s.stride == (2,)
  assert bytes(s) == b"hlo"
  r = a[::-1]
  assert type(r) is StridedArrayView1D
  assert r.stride == (-1,)
  assert bytes(r) == b"olleh"
  assert bytes(a[3:0:-2]) == b"le"
  assert r.obj is a.obj

def test_buffer_mismatch():
  with pytest.raises(DimensionMismatchError, match="expected one dimension but got 2"):
    ArrayView(np.zeros((2, 2), dtype=np.uint8))
  with pytest.raises(DimensionMismatchError, match="expected stride of 4 but got 8"):
    ArrayView(np.arange(6, dtype=np.int32)[::2])
  with pytest.raises(BufferError):
    ArrayView(np.arange(3, dtype=np.int32)[::-1])

def test_read_only():
  a = ArrayView(bytearray(b"abc"))
  with pytest.raises(TypeError):
    a[0] = 1
  with pytest.raises(ReadOnlyError):
    MutableArrayView(b"abc")
  assert not a.numpy().flags.writeable

def test_mutable():
  b = bytearray(b"abcde")
  m = MutableArrayView(b)
  m[1] = ord("X")
  assert b == bytearray(b"aXcde")
  with pytest.raises(OutOfRangeError):
    m[5] = 0
  s = m[::2]
  assert type(s) is MutableStridedArrayView1D
  s[2] = ord("Y")
  assert b == bytearray(b"aXcdY")
  assert type(m[1:3]) is MutableArrayView
  assert m.numpy().flags.writeable

def test_mutable_typed():
  nparr = np.zeros(4, dtype=np.int32)
  m = MutableArrayView(nparr)
  m[3] = -7
  assert nparr[3] == -7
  assert m[3] == -7
