from collections import defaultdict


class ViewStat:
  def __init__(self):
    self.reset()
  def reset(self):
    self._counter = defaultdict(lambda : defaultdict(int))
  def log(self, operator, view):
    self._counter[operator][view.__class__.__name__] += 1
  def get(self, operator):
    return self._counter[operator]
  def total(self):
    return sum(sum(v.values()) for k, v in self._counter.items())
  @property
  def info(self):
    info = {}
    for k, v in self._counter.items():
      info[k.name] = dict(v)
    return info

viewstat = ViewStat()
