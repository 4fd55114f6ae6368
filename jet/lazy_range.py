"""
Jet's one and only kind of sequence: a closed interval of integers,
seen through a chain of mapping functions that nobody calls until
somebody iterates. Ranges are immutable; `map` makes a new one.

Making a range is cheap no matter how big it is, and so is mapping it.
Printing one is also cheap, because printing gives up after a while.
"""
import math
from typing import Callable, Iterator, Optional

LONG_MIN = -2**63
LONG_MAX = 2**63 - 1

RENDER_BUDGET = 1000
ELLIPSIS = "..."

def to_long(x:float) -> int:
	""" Truncate toward zero, saturating at the 64-bit limits. NaN goes to zero. """
	if math.isnan(x): return 0
	if x >= LONG_MAX: return LONG_MAX
	if x <= LONG_MIN: return LONG_MIN
	return int(x)

class LazyRange:
	_start: int
	_end: int
	_mapper: Optional[Callable]   # None means identity.

	def __init__(self, start:int, end:int, mapper:Optional[Callable]=None):
		assert LONG_MIN <= start <= LONG_MAX and LONG_MIN <= end <= LONG_MAX, (start, end)
		self._start, self._end, self._mapper = start, end, mapper

	@staticmethod
	def of(start:int, end:int) -> "LazyRange":
		return LazyRange(start, end)

	@property
	def start(self): return self._start

	@property
	def end(self): return self._end

	def map(self, f:Callable) -> "LazyRange":
		g = self._mapper
		return LazyRange(self._start, self._end, f if g is None else lambda i: f(g(i)))

	def __iter__(self) -> Iterator:
		indices = range(self._start, self._end + 1)
		return iter(indices) if self._mapper is None else map(self._mapper, indices)

	def count(self) -> int:
		""" Not __len__, because the answer can be bigger than sys.maxsize """
		return max(0, self._end - self._start + 1)

	def is_empty(self) -> bool:
		return self._start > self._end

	def split(self, n:int) -> list["LazyRange"]:
		"""
		At most n contiguous non-empty pieces, in order, sharing this mapping.
		Sizes differ by at most one.
		"""
		assert n > 0
		count = self.count()
		n = min(n, count)
		pieces = []
		start = self._start
		for i in range(n):
			size = count // n + (1 if i < count % n else 0)
			pieces.append(LazyRange(start, start + size - 1, self._mapper))
			start += size
		return pieces

	def __repr__(self):
		return "<LazyRange %d..%d%s>" % (self._start, self._end, "" if self._mapper is None else " mapped")

	def __str__(self):
		text = "["
		for item in self:
			if len(text) > 1: text += ", "
			text += render(item)
			if len(text) > RENDER_BUDGET:
				text += ELLIPSIS
				break
		return text + "]"

def render_number(x:float) -> str:
	if math.isnan(x): return "NaN"
	if math.isinf(x): return "Infinity" if x > 0 else "-Infinity"
	if x == 0 and math.copysign(1.0, x) < 0: return "-0.0"
	if x.is_integer(): return str(int(x))
	return repr(x)

def render(value) -> str:
	""" How a value looks on the console. """
	if isinstance(value, bool): return str(value)
	if isinstance(value, float): return render_number(value)
	return str(value)
