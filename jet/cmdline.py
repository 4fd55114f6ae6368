"""
This is an interpreter for the Jet programming language.

{0}

For example:

    jet program.jet

will run program.jet if possible, or else try to explain why not.

    jet -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="jet",
	description="Interpreter for the Jet programming language.",
)
parser.add_argument("program", help="try examples/hello_world.jet for example.")
parser.add_argument('-c', "--check", action="store_true", help="Check the program but do not actually execute it.")
parser.add_argument('-p', "--parallel", action="store_true", help="Spread each reduce over a pool of worker threads.")
parser.add_argument('-w', "--workers", type=int, default=None, help="How many worker threads --parallel may use.")
parser.add_argument('-v', "--verbose", action="count", help="Say what is going on along the way.")

def run(args):
	from .diagnostics import Report, SyntaxException, ExecutionException, Cancelled, complain_about_run
	from .location import SourceIndex
	from .compiler import compile_text
	from .reducer import ParallelReducer, SequentialReducer
	from .scheduler import POOL_SIZE
	from .adapters.teletype_adapter import Console

	path = Path.cwd() / args.program
	try:
		with open(path, "r", encoding="utf-8") as fh:
			text = fh.read()
	except OSError as ex:
		print("Something went pear-shaped while trying to read %s: %s" % (path, ex), file=sys.stderr)
		return 1

	source = SourceIndex(text)
	report = Report(verbose=args.verbose, source=source)
	report.info("Compiling", path)
	try: program = compile_text(text, report)
	except SyntaxException:
		report.complain_to_console()
		return 1
	if args.check:
		print("Looks plausible to me.", file=sys.stderr)
		return 0

	if args.parallel:
		reducer = ParallelReducer(args.workers or POOL_SIZE)
	else:
		reducer = SequentialReducer()
	report.info("Running with", type(reducer).__name__)
	execution = program.run(Console(reducer))
	try:
		execution.wait()
	except KeyboardInterrupt:
		execution.cancel()
	failure = execution.exception()
	if isinstance(failure, Cancelled):
		print(failure, file=sys.stderr)
		return 1
	elif isinstance(failure, ExecutionException):
		complain_about_run(failure, source)
		return 1
	elif failure is not None:
		raise failure
	report.info("Done.")
	return 0

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
