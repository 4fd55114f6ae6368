import unittest

from jet import nodes
from jet.binder import bind
from jet.compiler import compile_text
from jet.diagnostics import Report, SyntaxException
from jet.front_end import parse_text

def _issues(text) -> list:
	try: compile_text(text)
	except SyntaxException as ex: return list(ex.issues)
	raise AssertionError("%r failed to fail" % text)

def _kinds(text) -> list[str]:
	return [i.kind for i in _issues(text)]

class BinderTests(unittest.TestCase):

	def test_slots_are_dense_and_in_order(self):
		program = compile_text("var a = 1 var b = a var c = b out c")
		self.assertEqual(3, program.nr_slots)
		self.assertEqual([0, 1, 2], [s.address for s in program.statements[:3]])
		self.assertEqual(2, program.statements[3].expr.address)

	def test_node_specialization(self):
		program = compile_text("out (1 + 2) - 3 * 4 / 5 ^ 6 out {1, 2}")
		first, second = program.statements
		self.assertIsInstance(first.expr, nodes.Sub)
		self.assertIsInstance(first.expr.lhs, nodes.Add)
		self.assertIsInstance(first.expr.rhs, nodes.Div)
		self.assertIsInstance(first.expr.rhs.rhs, nodes.Pow)
		self.assertIsInstance(second.expr, nodes.RangeCtor)

	def test_lambda_slots_start_over(self):
		program = compile_text("var a = 1 out reduce({1, 2}, a, x y -> y)")
		reduce_expr = program.statements[1].expr
		self.assertIsInstance(reduce_expr, nodes.ReduceExpr)
		self.assertEqual(2, reduce_expr.fn.arity)
		self.assertEqual(1, reduce_expr.fn.body.address)

	def test_print_keeps_its_text(self):
		program = compile_text('print "just so"')
		self.assertEqual("just so", program.statements[0].text)

	def test_issue_kinds(self):
		for kind, text in [
			("DuplicateDeclaration", "var a = 1 var a = 2"),
			("UndefinedVariable", "out a"),
			("UndefinedVariable", "var a = a"),
			("DuplicateArgument", "out reduce({1, 3}, 0, x x -> x)"),
			("ArityMismatch", "out map({1, 3}, x y -> x)"),
			("ArityMismatch", "out reduce({1, 3}, 0, x -> x)"),
			("NotAString", "print 1"),
			("MisplacedString", 'out "blah"'),
			("MisplacedString", 'var s = "blah"'),
		]:
			with self.subTest(text):
				self.assertEqual([kind], _kinds(text))

	def test_lambda_cannot_see_outer_variables(self):
		issue, = _issues("var n = 3\nout map({1, 3}, x -> x ^ n)")
		self.assertEqual("UndefinedVariable", issue.kind)
		self.assertEqual((2, 26), (issue.line, issue.column))

	def test_all_issues_come_together(self):
		issues = _issues('out a\nvar b = 1\nvar b = 2\nprint 1\nout map({1, 2}, p q -> p)')
		self.assertEqual(
			["UndefinedVariable", "DuplicateDeclaration", "NotAString", "ArityMismatch"],
			[i.kind for i in issues],
		)
		self.assertEqual([1, 3, 4, 5], [i.line for i in issues])

	def test_arity_message(self):
		issue, = _issues("out map({1, 3}, x y -> x)")
		self.assertEqual("Invalid number of arguments. Expected 1, got 2.", issue.message)

	def test_bind_a_parsed_script(self):
		report = Report()
		script = parse_text("var a = 1 out a + 1", report)
		self.assertEqual(1, bind(script, report).nr_slots)
		with self.assertRaises(SyntaxException):
			bind(parse_text("out q"))

	def test_syntax_errors_stop_before_binding(self):
		# The undefined `zz` is never reached; the parse error alone is reported.
		self.assertEqual(["syntax"], _kinds("out zz +"))

	def test_a_flood_of_issues_still_raises_syntax_exception(self):
		script = parse_text(" ".join("out x%d" % i for i in range(150)))
		with self.assertRaises(SyntaxException) as cm:
			bind(script)
		self.assertEqual(100, len(cm.exception.issues))
		self.assertEqual({"UndefinedVariable"}, {i.kind for i in cm.exception.issues})


if __name__ == '__main__':
	unittest.main()
