"""
Numbers and sequences play themselves: a Python float and a LazyRange.
Only the lambda needs a class of its own.
"""
from .. import nodes
from .evaluator import evaluate
from .types import Context

class Lambda:
	"""
	The run-time manifestation of a lambda literal. The body sees only the
	arguments it was called with, never the frame it was born in; what it
	does capture is the runtime and the cancellation token.
	"""
	def __init__(self, literal:nodes.LambdaLiteral, context:Context):
		self.arity = literal.arity
		self._body = literal.body
		self._context = context

	def __call__(self, *args):
		return evaluate(self._body, list(args), self._context)

	def __str__(self):
		return "<lambda/%d>" % self.arity
