import runtime_path  # isort:skip

import numpy as np
from utils import FS, Timer

from arrayview import StridedArrayView3D

def run(n_warmup=2, n_measure=10):
  for shape in ((4, 64, 64), (16, 128, 128)):
    nparr = np.random.randint(0, 255, size=shape).astype(np.uint8)
    view = StridedArrayView3D(nparr)
    cases = {
      "contiguous": (view, nparr),
      "transposed": (view.transposed(0, 2), nparr.swapaxes(0, 2)),
      "flipped": (view.flipped(1)[::2], np.flip(nparr, 1)[::2]),
      "broadcasted": (view[:, :1, :].broadcasted(1, shape[1]), np.broadcast_to(nparr[:, :1, :], shape)),
    }
    for name, (v, a) in cases.items():
      for _ in range(n_warmup): bytes(v)
      t1 = Timer("arrayview")
      for _ in range(n_measure):
        with t1:
          actual = bytes(v)

      for _ in range(n_warmup): a.tobytes()
      t2 = Timer("numpy")
      for _ in range(n_measure):
        with t2:
          expect = a.tobytes()

      factor = t2.ms/t1.ms
      color = FS["GREEN"] if t1.ms < t2.ms else FS["RED"]
      print(f"bytes({name} {'x'.join(map(str, v.size))})\t"
            f"arrayview: {t1.lap_ms:.3f}ms\t"
            f"numpy: {t2.lap_ms:.3f}ms\t"
            f"factor: {color}{factor:.3f}{FS['ENDC']}")
      assert actual == expect

run()
