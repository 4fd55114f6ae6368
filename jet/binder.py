"""
All the name resolution stuff goes here.
By the time this pass is finished, every name is a slot address, every
operator is a node class, and every literal is a value. One walk does it,
left to right, because a variable exists only after its declaration.

Binding keeps going after a problem so that one attempt reports them all,
but a program with any problem at all never comes out the other end.
"""
from typing import Optional
from boozetools.support.foundation import Visitor
from . import syntax, nodes
from .diagnostics import Report, SyntaxException, TooManyIssues
from .space import SlotTable, AlreadyExists
from .tree_walker.executive import Program

MAP_ARITY = 1
REDUCE_ARITY = 2

class Binder(Visitor):

	def __init__(self, report:Report):
		self._report = report

	def bind_script(self, script:syntax.Script) -> Program:
		table = SlotTable()
		try: statements = [self.visit(s, table) for s in script.statements]
		except TooManyIssues: raise SyntaxException(*self._report.issues)
		self._report.raise_if_sick()
		return Program(statements, len(table))

	def visit_VarDeclaration(self, it:syntax.VarDeclaration, table:SlotTable):
		# The right side binds first, so `var a = a` refers to nothing.
		expr = self.visit(it.expr, table)
		try: address = table.define(it.nom)
		except AlreadyExists:
			self._report.duplicate_declaration(it, it.nom.text)
			address = table.address(it.nom.key())
		return nodes.VariableDeclaration(it.position, address, expr)

	def visit_OutStatement(self, it:syntax.OutStatement, table:SlotTable):
		return nodes.Out(it.position, self.visit(it.expr, table))

	def visit_PrintStatement(self, it:syntax.PrintStatement, table:SlotTable):
		if isinstance(it.arg, syntax.StringLiteral):
			return nodes.Print(it.position, it.arg.text)
		self._report.not_a_string(it.arg)
		return nodes.Print(it.position, "")

	def visit_NumberLiteral(self, it:syntax.NumberLiteral, table:SlotTable):
		return nodes.Constant(it.position, float(it.text))

	def visit_StringLiteral(self, it:syntax.StringLiteral, table:SlotTable):
		self._report.misplaced_string(it)
		return nodes.Constant(it.position, it.text)

	def visit_Lookup(self, it:syntax.Lookup, table:SlotTable):
		address = table.address(it.nom.key())
		if address is None:
			self._report.undefined_variable(it, it.nom.text)
			address = -1
		return nodes.VarRef(it.position, address)

	def visit_BinExp(self, it:syntax.BinExp, table:SlotTable):
		cls = nodes.ARITHMETIC[it.op.text]
		return cls(it.position, self.visit(it.lhs, table), self.visit(it.rhs, table))

	def visit_Parenthesized(self, it:syntax.Parenthesized, table:SlotTable):
		return self.visit(it.expr, table)

	def visit_MapCall(self, it:syntax.MapCall, table:SlotTable):
		sequence = self.visit(it.sequence, table)
		fn = self.visit(it.fn, MAP_ARITY)
		return nodes.MapExpr(it.position, sequence, fn)

	def visit_ReduceCall(self, it:syntax.ReduceCall, table:SlotTable):
		sequence = self.visit(it.sequence, table)
		identity = self.visit(it.unit, table)
		fn = self.visit(it.fn, REDUCE_ARITY)
		return nodes.ReduceExpr(it.position, sequence, identity, fn)

	def visit_LambdaForm(self, it:syntax.LambdaForm, arity:int):
		# A lambda sees its own parameters and nothing else.
		inner = SlotTable()
		for nom in it.params:
			try: inner.define(nom)
			except AlreadyExists: self._report.duplicate_argument(nom, nom.text)
		if len(it.params) != arity:
			self._report.wrong_arity(it, arity, len(it.params))
		return nodes.LambdaLiteral(it.position, len(it.params), self.visit(it.body, inner))

def bind(script:syntax.Script, report:Optional[Report]=None) -> Program:
	"""
	Turn a syntax tree into an executable Program.
	Raises SyntaxException, carrying every issue found, if that cannot be done.
	"""
	assert isinstance(script, syntax.Script), script
	return Binder(report or Report()).bind_script(script)
