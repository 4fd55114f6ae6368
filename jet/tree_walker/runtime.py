import math
import operator
from .. import nodes
from ..lazy_range import LazyRange, to_long
from .evaluator import EVALUATE, evaluate, evaluate_as, attach_evaluation_methods
from .types import Context, FRAME, NUMBER, UNSET
from .values import Lambda

def _is_odd_integer(x:float) -> bool:
	return x.is_integer() and abs(x) < 2**53 and int(x) % 2 == 1

def _divide(a:float, b:float) -> float:
	# Python raises where IEEE-754 says infinity or NaN.
	if b == 0:
		if a == 0 or math.isnan(a) or math.isnan(b): return math.nan
		return math.copysign(math.inf, a) * math.copysign(1.0, b)
	return a / b

def _power(a:float, b:float) -> float:
	try: return math.pow(a, b)
	except OverflowError:
		return -math.inf if a < 0 and _is_odd_integer(b) else math.inf
	except ValueError:
		if a == 0:  # zero to a negative power
			return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
		return math.nan

PRIMITIVE_BINARY = {
	"^" : _power,
	"*" : operator.mul,
	"/" : _divide,
	"+" : operator.add,
	"-" : operator.sub,
}

def _number(expr:nodes.Expression, frame:FRAME, context:Context) -> NUMBER:
	return evaluate_as(expr, frame, context, float, "Number")

###############################################################################

def _eval_constant(expr:nodes.Constant, frame:FRAME, context:Context):
	return expr.value

def _eval_var_ref(expr:nodes.VarRef, frame:FRAME, context:Context):
	value = frame[expr.address]
	if value is UNSET:
		raise RuntimeError("Variable in slot %d was read before it was set" % expr.address)
	return value

def _arithmetic(expr:nodes.BinaryExpression, frame:FRAME, context:Context):
	a = _number(expr.lhs, frame, context)
	b = _number(expr.rhs, frame, context)
	return PRIMITIVE_BINARY[expr.glyph](a, b)

def _eval_range(expr:nodes.RangeCtor, frame:FRAME, context:Context):
	start = to_long(_number(expr.lhs, frame, context))
	end = to_long(_number(expr.rhs, frame, context))
	return LazyRange.of(start, end).map(float)

def _eval_lambda(expr:nodes.LambdaLiteral, frame:FRAME, context:Context):
	return Lambda(expr, context)

def _eval_map(expr:nodes.MapExpr, frame:FRAME, context:Context):
	sequence = evaluate_as(expr.sequence, frame, context, LazyRange, "Sequence")
	fn = evaluate_as(expr.fn, frame, context, Lambda, "Lambda")
	return sequence.map(fn)

def _eval_reduce(expr:nodes.ReduceExpr, frame:FRAME, context:Context):
	sequence = evaluate_as(expr.sequence, frame, context, LazyRange, "Sequence")
	identity = evaluate(expr.identity, frame, context)
	fn = evaluate_as(expr.fn, frame, context, Lambda, "Lambda")
	token = context.token

	def accumulate(acc, item):
		# This is the one place a run notices it has been cancelled.
		token.check()
		return fn(acc, item)

	return context.runtime.reducer.reduce(sequence, identity, accumulate)

###############################################################################

def _exec_variable_declaration(statement:nodes.VariableDeclaration, frame:FRAME, context:Context):
	frame[statement.address] = evaluate(statement.expr, frame, context)

def _exec_out(statement:nodes.Out, frame:FRAME, context:Context):
	context.runtime.out(evaluate(statement.expr, frame, context))

def _exec_print(statement:nodes.Print, frame:FRAME, context:Context):
	context.runtime.out(statement.text)

attach_evaluation_methods(globals())

# One method serves all the arithmetic node types:
for _cls in (nodes.Add, nodes.Sub, nodes.Mul, nodes.Div, nodes.Pow):
	EVALUATE[_cls] = _arithmetic
