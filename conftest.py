"""
# Supply &harness.core.Test instances to test functions collected by pytest.
"""
import pytest

from harness import core

@pytest.fixture
def test(request):
	t = core.Test(request.node.nodeid, request.function)
	with t.exits:
		yield t
