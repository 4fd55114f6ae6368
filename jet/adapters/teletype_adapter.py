import sys
from threading import Lock
from ..host import Runtime
from ..lazy_range import render

class Console(Runtime):
	""" Every `out` and `print` lands on its own line of standard output. """
	def __init__(self, reducer=None, stream=None):
		super().__init__(reducer)
		self._stream = stream or sys.stdout
		self._mutex = Lock()

	def out(self, value):
		text = render(value)
		with self._mutex:
			self._stream.write(text + "\n")
			self._stream.flush()
