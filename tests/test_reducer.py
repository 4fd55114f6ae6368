import operator
import threading
import unittest
from itertools import repeat

from jet.lazy_range import LazyRange
from jet.reducer import SequentialReducer, ParallelReducer
from jet.scheduler import WorkerPool, SimpleTask, CURRENT_THREAD, NewThread

class SequentialReducerTests(unittest.TestCase):

	def setUp(self) -> None:
		self.reducer = SequentialReducer()

	def test_reduce_associative(self):
		self.assertEqual(1000000, self.reducer.reduce(repeat(1, 1000000), 0, operator.add))

	def test_reduce_non_associative(self):
		self.assertEqual(-1000000, self.reducer.reduce(repeat(1, 1000000), 0, operator.sub))

	def test_order_is_left_to_right(self):
		self.assertEqual("abc", self.reducer.reduce(iter("abc"), "", operator.add))

class ParallelReducerTests(unittest.TestCase):

	@classmethod
	def setUpClass(cls) -> None:
		cls.reducer = ParallelReducer()

	def test_reduce_associative(self):
		self.assertEqual(1000000, self.reducer.reduce(repeat(1, 1000000), 0, operator.add))

	@unittest.skip("ParallelReducer can only handle associative functions")
	def test_reduce_non_associative(self):
		self.assertEqual(-1000000, self.reducer.reduce(repeat(1, 1000000), 0, operator.sub))

	def test_lazy_range(self):
		squares = LazyRange.of(1, 1000).map(lambda i: i * i)
		self.assertEqual(sum(squares), self.reducer.reduce(squares, 0, operator.add))

	def test_pieces_combine_in_order(self):
		# String concatenation is associative but not commutative.
		letters = "abcdefghijklmnopqrstuvwxyz" * 10
		self.assertEqual(letters, self.reducer.reduce(list(letters), "", operator.add))

	def test_empty_gives_identity(self):
		self.assertEqual(42, self.reducer.reduce(LazyRange.of(1, 0), 42, operator.add))
		self.assertEqual(42, self.reducer.reduce([], 42, operator.add))
		self.assertEqual(42, self.reducer.reduce(iter(()), 42, operator.add))

	def test_single_element(self):
		self.assertEqual(("id", 7), self.reducer.reduce([7], "id", lambda a, b: (a, b)))

	def test_nested_reduce_does_not_starve(self):
		# Each piece of the outer reduce runs a whole reduce of its own.
		triangles = LazyRange.of(1, 50).map(lambda i: self.reducer.reduce(LazyRange.of(1, i), 0, operator.add))
		expect = sum(i * (i + 1) // 2 for i in range(1, 51))
		self.assertEqual(expect, self.reducer.reduce(triangles, 0, operator.add))

	def test_failure_reaches_the_caller(self):
		def touchy(acc, i):
			if i == 500: raise ZeroDivisionError("touchy")
			return acc + i
		with self.assertRaises(ZeroDivisionError):
			self.reducer.reduce(LazyRange.of(1, 1000), 0, touchy)

	def test_shared_pool(self):
		pool = WorkerPool(2)
		a, b = ParallelReducer(pool=pool), ParallelReducer(pool=pool)
		self.assertEqual(5050, a.reduce(LazyRange.of(1, 100), 0, operator.add))
		self.assertEqual(5050, b.reduce(LazyRange.of(1, 100), 0, operator.add))

class ExecutorTests(unittest.TestCase):

	def test_current_thread(self):
		seen = []
		CURRENT_THREAD.execute(SimpleTask(seen.append, threading.current_thread()))
		self.assertEqual([threading.current_thread()], seen)

	def test_new_thread(self):
		seen, done = [], threading.Event()
		def job():
			seen.append(threading.current_thread())
			done.set()
		NewThread().execute(SimpleTask(job))
		self.assertTrue(done.wait(5))
		self.assertIsNot(threading.current_thread(), seen[0])

	def test_worker_pool_runs_everything(self):
		pool = WorkerPool(3)
		lock, seen, done = threading.Lock(), [], threading.Semaphore(0)
		def job(n):
			with lock: seen.append(n)
			done.release()
		for n in range(20):
			pool.execute(SimpleTask(job, n))
		for _ in range(20):
			self.assertTrue(done.acquire(timeout=5))
		self.assertEqual(list(range(20)), sorted(seen))


if __name__ == '__main__':
	unittest.main()
