"""
The simple task-queue version of a scheduler, plus a couple of trivial
executors. An executor is anything with an `execute(task)` method that
eventually calls `task.proceed()` exactly once, on some thread or other.

A program run is one task. So is each piece of a parallel reduce.
Nobody here knows the difference.
"""
from collections import deque
from functools import partial
from threading import Lock, Thread

POOL_SIZE = 3

class Task:
	""" One unit of work. Executors call `proceed` exactly once; it must not raise. """
	def proceed(self):
		raise NotImplementedError(type(self))

class SimpleTask(Task):
	""" Wraps a plain function call as a Task. """
	def __init__(self, job, *args, **kwargs):
		assert callable(job)
		self._call = partial(job, *args, **kwargs)
	def proceed(self):
		self._call()

class CurrentThread:
	""" Runs the task right now, on the caller's own thread. """
	def execute(self, task:Task):
		task.proceed()

CURRENT_THREAD = CurrentThread()

class NewThread:
	""" One fresh daemon thread per task. """
	def __init__(self, name="jet program"):
		self._name = name
	def execute(self, task:Task):
		Thread(target=task.proceed, daemon=True, name=self._name).start()

class WorkerPool:
	"""
	Responsible for a task queue and a fixed pool of worker threads.
	Workers are daemon threads, so an abandoned pool does not keep the process alive.
	Tasks are expected to deal with their own exceptions.
	"""

	def __init__(self, nr_workers:int=POOL_SIZE, name="jet worker"):
		assert nr_workers > 0
		self.nr_workers = nr_workers
		self._mutex = Lock()
		self._tasks = deque()
		self._idle = deque()
		for i in range(nr_workers):
			Thread(target=self._worker, daemon=True, name="%s %d" % (name, i)).start()

	def execute(self, task:Task):
		assert isinstance(task, Task)
		with self._mutex:
			self._tasks.append(task)
			if self._idle:
				# Let's wake workers LIFO rather than round-robin:
				self._idle.pop().release()

	def _worker(self):
		notify_me = Lock()
		notify_me.acquire()
		while True:
			self._mutex.acquire()
			while not self._tasks:
				self._idle.append(notify_me)
				self._mutex.release()
				notify_me.acquire()
				self._mutex.acquire()
			task = self._tasks.popleft()
			self._mutex.release()
			task.proceed()

