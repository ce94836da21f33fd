import io

from ..bin import parse
from ..bin import reformat
from ..bin import sort

def run(main, args, input=''):
	output = io.StringIO()
	status = io.StringIO()
	rv = main(args, input=io.StringIO(input), output=output, status=status)
	return rv, output.getvalue(), status.getvalue()

def test_parse(test):
	rv, out, err = run(parse.main, ['5.4.3-beta.1o', '1.2.3-rc.4+x', '1.2'])
	test/rv == 1
	test/out == "1\t2\t3\trelease_candidate\t4\t+x\n"
	test/err.startswith("1.2: ") == True

	rv, out, err = run(parse.main, ['5.4'], input="1.2\n\n3.4\n")
	test/rv == 0
	test/out == "1\t2\t0\trelease\t0\t\n3\t4\t0\trelease\t0\t\n"
	test/err == ''

	rv, out, err = run(parse.main, ['5.9', '1'])
	test/rv == 2
	test/out == ''

def test_reformat(test):
	rv, out, err = run(reformat.main, ['5.4.3-beta.1', 'v5.4.3.b1', '1.2.3-rc.4', '1.2.3.4'])
	test/rv == 0
	test/out == "v1.2.3.rc4\nv1.2.3.4\n"

	rv, out, err = run(reformat.main, ['5.4$.3$.1', '5.4.3.1'], input="1.2\nx\n")
	test/rv == 1
	test/out == "1.2.0.0\n"
	test/err.startswith("x: ") == True

	rv, out, err = run(reformat.main, ['5.4', '8'])
	test/rv == 2

def test_sort(test):
	rv, out, err = run(sort.main, [
		'5.4.3$-beta.1',
		'1.0.0', '1.0.0-rc.1', '0.9.9', '1.0.0-alpha.2', 'bad',
	])
	test/rv == 1
	test/out == "0.9.9\n1.0.0-alpha.2\n1.0.0-rc.1\n1.0.0\n"
	test/err.startswith("bad: ") == True

	# Equal versions retain their order.
	rv, out, err = run(sort.main, ['5.4$.3'], input="1.0.0\n0.9\n1.0\n")
	test/rv == 0
	test/out == "0.9\n1.0.0\n1.0\n"

if __name__ == '__main__':
	import sys
	from harness import engine
	engine.execute(sys.modules['__main__'])
