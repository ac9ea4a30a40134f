import runtime_path  # isort:skip

import numpy as np
import pytest

from arrayview import ArrayView, StridedArrayView2D
from arrayview.errors import InvalidSliceError
from arrayview.utils.array import calculate_slice

BOUNDS = (None, *range(-8, 9))

def visited(start, stop, step):
  if step > 0:
    return list(range(start, stop, step))
  return list(range(stop - 1, start - 1, step))

def test_normalized_range():
  for length in (0, 1, 2, 5, 7):
    for step in (None, -3, -2, -1, 1, 2, 3):
      for start in BOUNDS:
        for stop in BOUNDS:
          s = calculate_slice(start, stop, step, length)
          assert 0 <= s[0] <= s[1] <= length
          assert s[2] == (1 if step is None else step)

def test_same_elements_as_python():
  for length in (0, 1, 4, 7):
    items = list(range(length))
    for step in (-3, -2, -1, 1, 2, 3):
      for start in BOUNDS:
        for stop in BOUNDS:
          assert visited(*calculate_slice(start, stop, step, length)) == items[start:stop:step]

def test_negative_step_swaps():
  # [8:1:-3] visits 8, 5, 2
  assert calculate_slice(8, 1, -3, 10) == (2, 9, -3)
  assert calculate_slice(None, None, -1, 4) == (0, 4, -1)
  assert calculate_slice(8, 0, -3, 10) == (1, 9, -3)

def test_defaults():
  assert calculate_slice(None, None, None, 5) == (0, 5, 1)
  assert calculate_slice(-2, None, None, 5) == (3, 5, 1)
  assert calculate_slice(-100, 100, 2, 5) == (0, 5, 2)

def test_empty():
  assert calculate_slice(4, 2, 1, 5) == (4, 4, 1)
  assert calculate_slice(2, 5, -1, 10) == (2, 2, -1)
  assert calculate_slice(None, None, -1, 0) == (0, 0, -1)

def test_zero_step():
  for start, stop in ((None, None), (0, 5), (3, 1), (-1, 100)):
    with pytest.raises(InvalidSliceError):
      calculate_slice(start, stop, 0, 5)
  with pytest.raises(ValueError):
    calculate_slice(None, None, 0, 0)

def test_non_integer_bounds():
  for start, stop, step in ((1.5, None, None), (None, 2.0, None), (None, None, 1.0), ("1", None, None)):
    with pytest.raises(TypeError):
      calculate_slice(start, stop, step, 5)
  assert calculate_slice(np.int64(1), np.int32(-1), None, 5) == (1, 4, 1)
  view = StridedArrayView2D(np.zeros((2, 3), dtype=np.uint8))
  with pytest.raises(TypeError):
    view[:, 0.5:]
  with pytest.raises(TypeError):
    ArrayView(b"hello")[1.5:3]
