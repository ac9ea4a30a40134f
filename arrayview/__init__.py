from arrayview.containers import (ArrayView, MutableArrayView, MutableStridedArrayView1D,
                                  MutableStridedArrayView2D, MutableStridedArrayView3D, StridedArrayView,
                                  StridedArrayView1D, StridedArrayView2D, StridedArrayView3D, ViewOps)
from arrayview.errors import (ArrayViewError, DimensionMismatchError, InvalidAxisError, InvalidBroadcastError,
                              InvalidSliceError, OutOfRangeError, ReadOnlyError)
from arrayview.utils.misc import viewstat
