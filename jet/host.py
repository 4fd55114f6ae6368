"""
The boundary between a running program and whoever is running it.
The engine writes to a Runtime and asks it how to reduce; that's all.
"""
from abc import ABC, abstractmethod
from threading import Event
from typing import Optional
from .diagnostics import Cancelled
from .reducer import Reducer, SequentialReducer

class Runtime(ABC):
	"""
	Run-time environment. Subclasses decide where output goes.
	`out` may be called from some thread other than the one that started the run.
	"""
	reducer: Reducer

	def __init__(self, reducer:Optional[Reducer]=None):
		self.reducer = reducer or SequentialReducer()

	@abstractmethod
	def out(self, value):
		""" Receives, in program order, every `out` value and every `print` string. """

class CancellationToken:
	""" Single-shot: once cancelled, always cancelled. """
	def __init__(self):
		self._flag = Event()

	def cancel(self):
		self._flag.set()

	def is_cancelled(self) -> bool:
		return self._flag.is_set()

	def check(self):
		if self._flag.is_set():
			raise Cancelled()
