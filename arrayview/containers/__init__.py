from arrayview.containers.array import ArrayView, MutableArrayView
from arrayview.containers.base import ViewOps
from arrayview.containers.strided import (MutableStridedArrayView1D, MutableStridedArrayView2D,
                                          MutableStridedArrayView3D, StridedArrayView,
                                          StridedArrayView1D, StridedArrayView2D, StridedArrayView3D)
