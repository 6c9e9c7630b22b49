"""
# Provide the &pathroutes.test.library.Test instance to pytest collected test functions.
"""
import pytest

from pathroutes.test import library as libtest

class Test(libtest.Test):
	__slots__ = ()

	def skip(self, condition):
		if condition:
			pytest.skip(str(condition))

	def fail(self, cause):
		pytest.fail(str(cause))

@pytest.fixture
def test(request):
	t = Test(request.node.name, request.function)
	with t.exits:
		yield t
