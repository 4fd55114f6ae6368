"""
Scanner and parser for Jet, driven by tables that booze-tools builds from `Jet.md`.
The grammar itself lives over there; this is the code that gives it meaning.

Errors do not stop the parse. Each one goes on the report, and then the
parser resynchronizes at the next statement keyword and carries on.
"""
import sys
from pathlib import Path
from typing import Optional, Union

from boozetools.macroparse.runtime import TypicalApplication, make_tables
from boozetools.scanning.engine import IterableScanner
from boozetools.parsing.interface import ParseError, END_OF_TOKENS, ERROR_SYMBOL
from . import syntax
from .diagnostics import Report, Issue, TooManyIssues
from .location import SourceIndex
from .ontology import Nom, Position

class JetParseError(ParseError):
	pass

_tables = make_tables(Path(__file__).parent/"Jet.md")
_parse_table = _tables['parser']
RESERVED = frozenset(t.lower() for t in _parse_table["terminals"] if t.isupper() and t.isalpha())

_DESCRIPTION = {
	"name": "a name",
	"number": "a number",
	"sign": "a signed number",
	"string": "a string",
	END_OF_TOKENS: "end of input",
}

def _describe(terminal:str) -> str:
	if terminal in _DESCRIPTION: return _DESCRIPTION[terminal]
	if terminal.isupper(): return terminal.lower()
	return repr(terminal)

def _one_of(options:list[str]) -> str:
	if len(options) < 2: return "".join(options) or "something else"
	return ", ".join(options[:-1]) + " or " + options[-1]

class JetParser(TypicalApplication):
	"""
	Make a fresh one for each parse: the actions need to know
	where to file complaints and how to find line and column.
	"""

	def __init__(self, report:Report):
		super().__init__(_tables)
		self._report = report
		self._index = report.source

	def _position(self, yy:IterableScanner) -> Position:
		return self._index.position(yy.left)

	def _token(self, yy:IterableScanner, kind:str):
		yy.token(kind, syntax.Token(kind, yy.match(), self._position(yy)))

	def scan_ignore(self, yy:IterableScanner): pass

	def scan_number(self, yy:IterableScanner): self._token(yy, "number")

	def scan_sign(self, yy:IterableScanner): self._token(yy, "sign")

	def scan_string(self, yy:IterableScanner): self._token(yy, "string")

	def scan_punctuation(self, yy:IterableScanner):
		self._token(yy, sys.intern(yy.match()))

	def scan_word(self, yy:IterableScanner):
		word = yy.match()
		if word in RESERVED: self._token(yy, word.upper())
		else: yy.token("name", Nom(sys.intern(word), self._position(yy)))

	def scan_unterminated(self, yy:IterableScanner):
		self._report.unterminated_string(self._position(yy))

	def on_stuck(self, yy:IterableScanner):
		# The scanner has already stepped over the offending character.
		self._report.bad_character(self._position(yy), yy.match())

	@staticmethod
	def parse_broken(_): return None

	@staticmethod
	def parse_first(item): return [item]

	@staticmethod
	def parse_more(some, another):
		some.append(another)
		return some

	@staticmethod
	def parse_signed(sign:syntax.Token, number:syntax.Token):
		return syntax.NumberLiteral(syntax.Token("number", sign.text + number.text, sign.position))

	@staticmethod
	def parse_range(brace:syntax.Token, lhs, comma:syntax.Token, rhs):
		return syntax.BinExp(lhs, comma, rhs, brace.position)

	@staticmethod
	def default_parse(ctor, *args):
		return getattr(syntax, ctor)(*args)

	def unexpected_token(self, kind, semantic, pds):
		expected = [_describe(t) for t in self.expected_tokens(pds) if t != ERROR_SYMBOL]
		if semantic is None:
			where, found, width = self._index.end(), _describe(kind), 1
		else:
			where, found, width = semantic.position, repr(semantic.text), semantic.width()
		self._report.unexpected(where, found, _one_of(expected), width)

	def will_recover(self, tokens):
		return None

	def did_not_recover(self):
		raise JetParseError()

def parse_text(text:str, report:Optional[Report]=None) -> Union[syntax.Script, list[Issue]]:
	"""
	Either a syntax tree, or else every syntax error found along the way.
	This does not raise on bad input; that decision belongs to the caller.
	"""
	if report is None:
		report = Report(source=SourceIndex(text))
	elif report.source is None:
		report.source = SourceIndex(text)
	try:
		tree = JetParser(report).parse(text)
	except (JetParseError, TooManyIssues):
		return list(report.issues)
	if report.sick():
		return list(report.issues)
	return tree
