"""
This module aims to express an interface agreement
between the evaluator and various kinds of data.
"""
from typing import NamedTuple, Union
from ..host import Runtime, CancellationToken
from ..lazy_range import LazyRange

class Context(NamedTuple):
	""" What every evaluation step can reach besides its frame. """
	runtime: Runtime
	token: CancellationToken

NUMBER = float
VALUE = Union[NUMBER, LazyRange, "Lambda"]
FRAME = list  # of VALUE, indexed by slot address

class _Unset:
	def __repr__(self): return "<unset>"

UNSET = _Unset()
