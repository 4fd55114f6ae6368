"""
This is the overall control for running a bound program:
a fresh frame per run, one unit of work per run, and a handle
the caller can wait on or cancel.
"""
from threading import Event, Lock
from typing import Callable, Optional, Sequence
from .. import nodes
from ..diagnostics import Cancelled
from ..host import Runtime, CancellationToken
from ..scheduler import CURRENT_THREAD, NewThread, SimpleTask
from .evaluator import execute
from .types import Context, UNSET
from . import runtime  # NOQA: importing it attaches the evaluation methods.

PENDING, RUNNING, FINISHED, FAILED, CANCELLED = "pending", "running", "finished", "failed", "cancelled"
_SETTLED = frozenset([FINISHED, FAILED, CANCELLED])

class Execution:
	"""
	A handle on one run of a program. Somewhat in the spirit of a future,
	except that a program has no result: it talks to its Runtime instead.

	Cancelling takes effect on the handle at once: waiters wake up and see
	`Cancelled`. The run itself notices at its next reduction step, or else
	runs to the end, and whatever it comes to is disregarded.
	"""
	_callbacks: list[Callable[["Execution"], None]]

	def __init__(self):
		self.token = CancellationToken()
		self._mutex = Lock()
		self._settled = Event()
		self._state = PENDING
		self._failure = None
		self._callbacks = []

	@property
	def state(self) -> str: return self._state

	def done(self) -> bool: return self._state in _SETTLED
	def running(self) -> bool: return self._state == RUNNING
	def cancelled(self) -> bool: return self._state == CANCELLED

	def cancel(self) -> bool:
		""" False if the run had already finished or failed; True otherwise. """
		self.token.cancel()
		return self._settle(CANCELLED, Cancelled()) or self._state == CANCELLED

	def wait(self, timeout:Optional[float]=None) -> bool:
		""" True if the run is settled, one way or another. """
		return self._settled.wait(timeout)

	def exception(self, timeout:Optional[float]=None) -> Optional[Exception]:
		""" What went wrong, if anything. A cancelled run answers with its Cancelled. """
		if not self.wait(timeout):
			raise TimeoutError("The run has not finished yet.")
		return self._failure

	def result(self, timeout:Optional[float]=None) -> None:
		""" Wait for the run, and raise whatever stopped it (if anything). """
		failure = self.exception(timeout)
		if failure is not None:
			raise failure

	def add_done_callback(self, fn:Callable[["Execution"], None]):
		with self._mutex:
			if self._state not in _SETTLED:
				self._callbacks.append(fn)
				return
		fn(self)

	# The remaining methods are for the run itself:

	def start(self) -> bool:
		with self._mutex:
			if self._state != PENDING: return False
			self._state = RUNNING
			return True

	def finish(self):
		self._settle(FINISHED, None)

	def fail(self, ex:Exception):
		self._settle(CANCELLED if isinstance(ex, Cancelled) else FAILED, ex)

	def _settle(self, state:str, failure:Optional[Exception]) -> bool:
		with self._mutex:
			if self._state in _SETTLED: return False
			self._state, self._failure = state, failure
			callbacks, self._callbacks = self._callbacks, []
		self._settled.set()
		for fn in callbacks: fn(self)
		return True

class Program:
	"""
	A top-level object representing a bound program: a list of statements
	and the number of variable slots they need. Programs keep no state
	between runs, so one Program can be running any number of times at once.
	"""
	def __init__(self, statements:Sequence[nodes.Statement], nr_slots:int):
		self._statements = tuple(statements)
		self.nr_slots = nr_slots

	@property
	def statements(self) -> tuple[nodes.Statement, ...]:
		return self._statements

	def run(self, runtime:Runtime, executor=None) -> Execution:
		"""
		Runs the program in the background on the provided executor,
		or on a thread of its own if none is given. Any `reduce` may
		farm work out elsewhere, according to the runtime's reducer.
		"""
		execution = Execution()
		(executor or NewThread()).execute(SimpleTask(self._run, runtime, execution))
		return execution

	def run_and_wait(self, runtime:Runtime):
		"""
		Runs the program on the current thread and raises whatever stopped it:
		an ExecutionException for a fault in the program, or Cancelled.
		"""
		self.run(runtime, CURRENT_THREAD).result()

	def _run(self, runtime:Runtime, execution:Execution):
		if not execution.start():
			return  # Cancelled before it ever began.
		frame = [UNSET] * self.nr_slots
		context = Context(runtime, execution.token)
		try:
			for statement in self._statements:
				execute(statement, frame, context)
		except Exception as ex:
			execution.fail(ex)
		else:
			execution.finish()
