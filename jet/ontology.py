"""
These most-fundamental classes are shared between the parse tree
and the executable tree, and separate from both to avoid various
circular-import scenarios. Everything the user can be told about
came from some place in the source text, so everything knows where.
"""
from typing import NamedTuple

class Position(NamedTuple):
	line: int    # 1-based
	column: int  # 1-based
	def __str__(self): return "%d:%d" % (self.line, self.column)

NOWHERE = Position(0, 0)

class Phrase:
	""" Anything that can be blamed for something. """
	position: Position

	@property
	def line(self) -> int: return self.position.line

	@property
	def column(self) -> int: return self.position.column

	def width(self) -> int:
		""" How many characters to underline when illustrating this phrase """
		return 1

class Nom(Phrase):
	""" Representing the occurrence of a name anywhere. """
	def __init__(self, text:str, position:Position):
		assert isinstance(text, str)
		self.text, self.position = text, position
	def __repr__(self): return "<Name %r>" % self.text
	def key(self): return self.text
	def width(self): return len(self.text)
