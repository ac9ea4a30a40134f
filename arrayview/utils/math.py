import functools
import operator


def prod(x):
  return functools.reduce(operator.mul, x, 1)

def ceildiv(a, b):
  return -(-a // b)
