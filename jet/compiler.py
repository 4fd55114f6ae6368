"""
From source text to a runnable Program in one call.
"""
from typing import Optional
from .binder import bind
from .diagnostics import Report, SyntaxException, TooManyIssues
from .front_end import parse_text
from .location import SourceIndex
from .tree_walker.executive import Program

def compile_text(text:str, report:Optional[Report]=None) -> Program:
	"""
	Parses the code and returns an executable program.
	Raises SyntaxException, carrying every issue found, if the text is no good.
	"""
	if report is None:
		report = Report(source=SourceIndex(text))
	try:
		tree = parse_text(text, report)
		report.raise_if_sick()
		return bind(tree, report)
	except TooManyIssues:
		raise SyntaxException(*report.issues)
