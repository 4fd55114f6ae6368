"""
The executable tree: what the binder makes and the evaluator walks.

Every name has already been turned into a slot address, every operator
into its own node class, and every literal into a value. Nodes are not
supposed to change after construction; the binder builds each one exactly
once and hands it to exactly one parent.
"""
from .ontology import Phrase, Position

class Node(Phrase):
	def __init__(self, position:Position):
		self.position = position

###############################################################################

class Expression(Node): pass

class Constant(Expression):
	def __init__(self, position, value):
		super().__init__(position)
		self.value = value
	def __repr__(self): return "Constant(%r)" % (self.value,)

class VarRef(Expression):
	def __init__(self, position, address:int):
		super().__init__(position)
		self.address = address
	def __repr__(self): return "VarRef(%d)" % self.address

class BinaryExpression(Expression):
	glyph: str
	def __init__(self, position, lhs:Expression, rhs:Expression):
		super().__init__(position)
		self.lhs, self.rhs = lhs, rhs
	def __repr__(self): return "%s(%r, %r)" % (type(self).__name__, self.lhs, self.rhs)

class Add(BinaryExpression):
	glyph = "+"

class Sub(BinaryExpression):
	glyph = "-"

class Mul(BinaryExpression):
	glyph = "*"

class Div(BinaryExpression):
	glyph = "/"

class Pow(BinaryExpression):
	glyph = "^"

class RangeCtor(BinaryExpression):
	glyph = ","

ARITHMETIC = {cls.glyph: cls for cls in (Add, Sub, Mul, Div, Pow, RangeCtor)}

class LambdaLiteral(Expression):
	def __init__(self, position, arity:int, body:Expression):
		super().__init__(position)
		self.arity, self.body = arity, body
	def __repr__(self): return "LambdaLiteral(%d, %r)" % (self.arity, self.body)

class MapExpr(Expression):
	def __init__(self, position, sequence:Expression, fn:LambdaLiteral):
		super().__init__(position)
		self.sequence, self.fn = sequence, fn

class ReduceExpr(Expression):
	def __init__(self, position, sequence:Expression, identity:Expression, fn:LambdaLiteral):
		super().__init__(position)
		self.sequence, self.identity, self.fn = sequence, identity, fn

###############################################################################

class Statement(Node): pass

class VariableDeclaration(Statement):
	def __init__(self, position, address:int, expr:Expression):
		super().__init__(position)
		self.address, self.expr = address, expr

class Out(Statement):
	def __init__(self, position, expr:Expression):
		super().__init__(position)
		self.expr = expr

class Print(Statement):
	def __init__(self, position, text:str):
		super().__init__(position)
		self.text = text

