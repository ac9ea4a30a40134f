import time


class Timer:
  """Accumulates wall time over every `with` block it guards."""
  def __init__(self, name:str):
    self.name = name
    self.laps = 0
    self.__seconds = 0.0

  @property
  def ms(self) -> float:
    return self.__seconds * 1000

  @property
  def lap_ms(self) -> float:
    return self.ms / max(self.laps, 1)

  def __enter__(self):
    self.st = time.perf_counter()
    return self

  def __exit__(self, *args, **kwargs):
    self.__seconds += time.perf_counter() - self.st
    self.laps += 1

FS = {
  "RED": "\033[91m",
  "GREEN": "\033[92m",
  "ENDC": "\033[0m"
}
