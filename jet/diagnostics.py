import sys, random
from typing import NamedTuple, Optional, Sequence
from boozetools.support.failureprone import illustration

from .location import SourceIndex
from .ontology import Phrase, Position

class Issue(NamedTuple):
	""" One positioned complaint about a program that could not be built. """
	line: int
	column: int
	message: str
	kind: str = "syntax"
	width: int = 1
	def __str__(self): return "%d:%d: %s" % (self.line, self.column, self.message)

class SyntaxException(Exception):
	""" The program could not be built. There is no partial credit. """
	issues: tuple[Issue, ...]
	def __init__(self, *issues:Issue):
		assert issues
		super().__init__(*issues)
		self.issues = issues
	def __str__(self): return "\n".join(map(str, self.issues))

class ExecutionException(Exception):
	""" Something went wrong while running, and this is where. """
	def __init__(self, line:int, column:int, message:str):
		super().__init__(message)
		self.line, self.column, self.message = line, column, message
	def __str__(self): return "%d:%d: %s" % (self.line, self.column, self.message)

class TypeMismatch(ExecutionException):
	pass

class Cancelled(Exception):
	""" Somebody asked the program to stop, and it did. Not the program's fault. """
	def __init__(self, message="The run was cancelled."):
		super().__init__(message)

class TooManyIssues(Exception):
	pass

def _outburst():
	minced_oaths = ['Ack', 'Blargh', 'Confound it', 'Crud', 'Drat', 'Fiddlesticks', 'Good Grief', 'Nuts', 'Rats', ]
	resignations = ['I am undone.', 'I cannot continue.', 'I need to ask for help.', ]
	return "%s! %s" % tuple(map(random.choice, (minced_oaths, resignations)))

class Report:
	"""
	Collects the issues that passes find, so that a program with three
	mistakes gets told about all three at once. Also the place where
	progress chatter goes, if anybody asked for it.
	"""
	_issues : list[Issue]

	def __init__(self, *, verbose:int=0, max_issues=100, source:Optional[SourceIndex]=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues
		self.source = source

	@property
	def issues(self) -> tuple[Issue, ...]: return tuple(self._issues)

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:Issue):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def error(self, where:Position, msg:str, kind:str="syntax", width:int=1):
		self.issue(Issue(where.line, where.column, msg, kind, width))

	def blame(self, guilty:Phrase, msg:str, kind:str):
		assert isinstance(guilty, Phrase), guilty
		self.error(guilty.position, msg, kind, guilty.width())

	def raise_if_sick(self):
		if self._issues:
			raise SyntaxException(*self._issues)

	# Methods the front-end is likely to call:
	def unexpected(self, where:Position, found:str, expected:str, width:int=1):
		self.error(where, "Unexpected %s; expected %s." % (found, expected), width=width)

	def bad_character(self, where:Position, char:str):
		self.error(where, "I do not know what to make of %r here." % char)

	def unterminated_string(self, where:Position):
		self.error(where, "This string never ends. Is a closing quote missing?")

	# Methods the binder calls:
	def duplicate_declaration(self, guilty:Phrase, name:str):
		self.blame(guilty, "Duplicate declaration: %s" % name, "DuplicateDeclaration")

	def undefined_variable(self, guilty:Phrase, name:str):
		self.blame(guilty, "Undefined variable: %s" % name, "UndefinedVariable")

	def duplicate_argument(self, guilty:Phrase, name:str):
		self.blame(guilty, "Duplicate argument name: %s" % name, "DuplicateArgument")

	def wrong_arity(self, guilty:Phrase, need:int, got:int):
		msg = "Invalid number of arguments. Expected %d, got %d." % (need, got)
		self.blame(guilty, msg, "ArityMismatch")

	def not_a_string(self, guilty:Phrase):
		self.blame(guilty, "Only a string literal can be printed here.", "NotAString")

	def misplaced_string(self, guilty:Phrase):
		self.blame(guilty, "A string literal only makes sense right after print.", "MisplacedString")

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan([self.illustrate(i) for i in self._issues])

	def illustrate(self, it:Issue) -> str:
		if self.source is None or it.line < 1:
			return str(it)
		single_line = self.source.line_of_text(it.line)
		picture = illustration(single_line, it.column-1, it.width, prefix='% 6d |' % it.line, caption=it.message)
		return "%s\n%s" % (it, picture)

def complain_about_run(ex:ExecutionException, source:Optional[SourceIndex]=None):
	""" A run-time fault gets the same treatment as a syntax issue, more or less. """
	report = Report(source=source)
	_bemoan([report.illustrate(Issue(ex.line, ex.column, ex.message, "run-time"))])

def _bemoan(pictures:Sequence[str]):
	if pictures:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for p in pictures:
		print("  -"*20, file=sys.stderr)
		print(p, file=sys.stderr)
	sys.stderr.flush()
