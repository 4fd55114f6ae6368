"""
Pluggable strategies for folding a sequence down to one value.

The evaluator never decides how a `reduce` expression gets done.
It asks the runtime for a Reducer and hands over the sequence,
the identity, and an accumulator `(acc, elem) -> acc`.
"""
import functools
from abc import ABC, abstractmethod
from threading import Event, Lock
from typing import Callable, Iterable, Sequence, TypeVar
from .lazy_range import LazyRange
from .scheduler import POOL_SIZE, Task, WorkerPool

T = TypeVar("T")
ACCUMULATOR = Callable[[T, T], T]

class Reducer(ABC):
	"""
	Performs a reduction on the elements of the provided sequence,
	using the provided identity value and accumulation function,
	and returns the reduced value.
	"""
	@abstractmethod
	def reduce(self, sequence:Iterable[T], identity:T, accumulator:ACCUMULATOR) -> T:
		pass

class SequentialReducer(Reducer):
	"""
	Performs reduction sequentially on the caller thread.
	This implementation can also work with non-associative accumulators.
	"""
	def reduce(self, sequence:Iterable[T], identity:T, accumulator:ACCUMULATOR) -> T:
		return functools.reduce(accumulator, sequence, identity)

class ParallelReducer(Reducer):
	"""
	Performs parallel reduction on a pool of worker threads.
	The accumulator function MUST be associative.

	Each piece folds from the identity on its own, and then the partial
	results combine left to right with that same accumulator. The caller
	thread is not idle in the meantime: it folds every piece that no worker
	has picked up yet, which also means a reduce nested inside a reduce
	cannot starve for want of workers.
	"""
	def __init__(self, nr_workers:int=POOL_SIZE, pool:WorkerPool=None):
		self._pool = pool or WorkerPool(nr_workers, name="jet reducer")
		self._nr_pieces = self._pool.nr_workers + 1

	def reduce(self, sequence:Iterable[T], identity:T, accumulator:ACCUMULATOR) -> T:
		pieces = _partition(sequence, self._nr_pieces)
		if len(pieces) < 2:
			return functools.reduce(accumulator, pieces[0] if pieces else (), identity)
		reduction = _Reduction()
		folds = [_Fold(piece, identity, accumulator, reduction) for piece in pieces]
		for fold in reversed(folds[1:]):
			self._pool.execute(fold)
		for fold in folds:
			fold.join()
		if reduction.failure is not None:
			raise reduction.failure
		return functools.reduce(accumulator, (fold.result for fold in folds[1:]), folds[0].result)

def _partition(sequence:Iterable, n:int) -> list:
	if isinstance(sequence, LazyRange):
		return sequence.split(n)
	items = sequence if isinstance(sequence, Sequence) else list(sequence)
	count = len(items)
	if not count: return []
	n = min(n, count)
	bounds = [count * i // n for i in range(n + 1)]
	return [items[bounds[i]:bounds[i+1]] for i in range(n)]

class _Reduction:
	""" Shared fate among the pieces of one reduce. The first failure wins. """
	def __init__(self):
		self._mutex = Lock()
		self.failure = None

	def fail(self, ex:Exception):
		with self._mutex:
			if self.failure is None:
				self.failure = ex

	def is_failed(self) -> bool:
		return self.failure is not None

class _Fold(Task):
	def __init__(self, piece:Iterable, identity, accumulator:ACCUMULATOR, reduction:_Reduction):
		self._piece = piece
		self._identity = identity
		self._accumulator = accumulator
		self._reduction = reduction
		self._claim = Lock()
		self._done = Event()
		self.result = None

	def proceed(self):
		# Whoever gets here first does the work; anybody else has nothing to do.
		if not self._claim.acquire(blocking=False):
			return
		try:
			acc = self._identity
			for item in self._piece:
				if self._reduction.is_failed():
					return
				acc = self._accumulator(acc, item)
			self.result = acc
		except Exception as ex:
			self._reduction.fail(ex)
		finally:
			self._done.set()

	def join(self):
		self.proceed()
		self._done.wait()
