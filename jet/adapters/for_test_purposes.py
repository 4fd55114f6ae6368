"""
A runtime that just remembers what it was told,
mainly for the benefit of the language test cases.
"""
from threading import Lock
from ..host import Runtime
from ..lazy_range import LazyRange

class Transcript(Runtime):
	def __init__(self, reducer=None):
		super().__init__(reducer)
		self._mutex = Lock()
		self.outputs = []

	def out(self, value):
		with self._mutex:
			self.outputs.append(value)

	def materialized(self) -> list:
		""" Outputs with every sequence spelled out as a (possibly nested) list """
		with self._mutex:
			return [_materialize(v) for v in self.outputs]

def _materialize(value):
	if isinstance(value, LazyRange):
		return [_materialize(v) for v in value]
	return value
