"""
The generic machinery that everything needs,
without the specific methods corresponding to particular node types.

Every trip through `evaluate` or `execute` is also an error boundary:
whatever goes wrong below comes out positioned at the closest node
that knows where it is, unless it already knew.
"""
from .. import nodes
from ..diagnostics import ExecutionException, TypeMismatch, Cancelled
from .types import Context, FRAME

EVALUATE = {}
EXECUTE = {}

def evaluate(expr:nodes.Expression, frame:FRAME, context:Context):
	try: fn = EVALUATE[type(expr)]
	except KeyError: raise NotImplementedError(type(expr), expr)
	try:
		return fn(expr, frame, context)
	except (ExecutionException, Cancelled):
		raise
	except Exception as ex:
		raise _positioned(expr, ex) from ex

def evaluate_as(expr:nodes.Expression, frame:FRAME, context:Context, kind:type, description:str):
	value = evaluate(expr, frame, context)
	if isinstance(value, kind) and not isinstance(value, bool):
		return value
	raise TypeMismatch(expr.line, expr.column, "Expected a %s." % description)

def execute(statement:nodes.Statement, frame:FRAME, context:Context):
	try: fn = EXECUTE[type(statement)]
	except KeyError: raise NotImplementedError(type(statement), statement)
	try:
		fn(statement, frame, context)
	except (ExecutionException, Cancelled):
		raise
	except Exception as ex:
		raise _positioned(statement, ex) from ex

def _positioned(node:nodes.Node, ex:Exception) -> ExecutionException:
	detail = str(ex) or type(ex).__name__
	return ExecutionException(node.line, node.column, "Run-time exception %s" % detail)

def attach_evaluation_methods(python_scope):
	for _k, _v in list(python_scope.items()):
		if _k.startswith("_eval_"): table, key = EVALUATE, "expr"
		elif _k.startswith("_exec_"): table, key = EXECUTE, "statement"
		else: continue
		_t = _v.__annotations__[key]
		assert isinstance(_t, type), (_k, _t)
		table[_t] = _v
