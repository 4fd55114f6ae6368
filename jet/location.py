"""
I want a simple, light-weight way to go from character offsets to (line, column) pairs.
The concept is simple: Remember where each line starts, and bisect.
"""
from bisect import bisect_right
from .ontology import Position

class SourceIndex:
	_starts: list[int]

	def __init__(self, text:str):
		self.text = text
		self._starts = [0]
		for i, c in enumerate(text):
			if c == "\n": self._starts.append(i+1)

	def position(self, offset:int) -> Position:
		row = bisect_right(self._starts, offset)
		return Position(row, offset - self._starts[row-1] + 1)

	def line_of_text(self, line:int) -> str:
		""" The text of a 1-based line, sans line-break """
		start = self._starts[line-1]
		stop = self._starts[line] - 1 if line < len(self._starts) else len(self.text)
		return self.text[start:stop].rstrip("\r")

	def end(self) -> Position:
		return self.position(len(self.text))
