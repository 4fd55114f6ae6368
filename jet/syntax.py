"""
The set of parse-nodes in simple form.
The parser calls these constructors bottom-up; the binder later walks them
exactly once to produce the executable tree in `nodes`. Nothing here knows
about slots, values, or running anything.
"""
from typing import Sequence
from .ontology import Phrase, Nom, Position

class Token(Phrase):
	def __init__(self, kind:str, text:str, position:Position):
		self.kind, self.text, self.position = kind, text, position
	def __repr__(self): return "<%s %r @%s>" % (self.kind, self.text, self.position)
	def width(self): return max(1, len(self.text))

class ValueExpression(Phrase):
	pass

class Statement(Phrase):
	pass

class Script(Phrase):
	""" After a syntax error, a statement may come out as None. Such a script never gets bound. """
	def __init__(self, statements:Sequence[Statement]):
		self.statements = statements
		self.position = Position(1, 1)

class VarDeclaration(Statement):
	def __init__(self, keyword:Token, nom:Nom, expr:ValueExpression):
		self.position = keyword.position
		self.nom, self.expr = nom, expr

class OutStatement(Statement):
	def __init__(self, keyword:Token, expr:ValueExpression):
		self.position = keyword.position
		self.expr = expr

class PrintStatement(Statement):
	def __init__(self, keyword:Token, arg:ValueExpression):
		self.position = keyword.position
		self.arg = arg

class NumberLiteral(ValueExpression):
	def __init__(self, token:Token):
		self.position = token.position
		self.text = token.text
	def width(self): return len(self.text)
	def __repr__(self): return self.text

class StringLiteral(ValueExpression):
	""" Holds the text between the quotes, verbatim. """
	def __init__(self, token:Token):
		self.position = token.position
		self.text = token.text[1:-1]
	def width(self): return len(self.text) + 2

class Lookup(ValueExpression):
	def __init__(self, nom:Nom):
		self.position = nom.position
		self.nom = nom
	def width(self): return self.nom.width()
	def __repr__(self): return "<ref:%s>" % self.nom.text

class BinExp(ValueExpression):
	"""
	Arithmetic, and also the comma inside range braces.
	Position is that of the leftmost token, i.e. of lhs or the opening brace.
	"""
	def __init__(self, lhs:ValueExpression, op:Token, rhs:ValueExpression, position:Position=None):
		self.position = position or lhs.position
		self.lhs, self.op, self.rhs = lhs, op, rhs
	def __repr__(self): return "(%r %s %r)" % (self.lhs, self.op.text, self.rhs)

class Parenthesized(ValueExpression):
	def __init__(self, paren:Token, expr:ValueExpression):
		self.position = paren.position
		self.expr = expr

class LambdaForm(ValueExpression):
	def __init__(self, params:Sequence[Nom], body:ValueExpression):
		assert params
		self.position = params[0].position
		self.params, self.body = params, body

class MapCall(ValueExpression):
	def __init__(self, keyword:Token, sequence:ValueExpression, fn:LambdaForm):
		self.position = keyword.position
		self.sequence, self.fn = sequence, fn

class ReduceCall(ValueExpression):
	def __init__(self, keyword:Token, sequence:ValueExpression, unit:ValueExpression, fn:LambdaForm):
		self.position = keyword.position
		self.sequence, self.unit, self.fn = sequence, unit, fn
