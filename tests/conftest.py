"""Test configuration ensuring the project source tree is importable."""

from __future__ import annotations

import importlib
import io
import sys
from pathlib import Path
from typing import Any, Callable

import pytest

ROOT = Path(__file__).resolve().parent.parent

root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)
else:
    idx = sys.path.index(root_str)
    if idx != 0:
        sys.path.insert(0, sys.path.pop(idx))

# Import the project package eagerly so subsequent imports reuse it
importlib.import_module("unbundler")

from unbundler.js_ast import Node, from_estree  # noqa: E402
from unbundler.parser import parse_bundle  # noqa: E402


SAMPLE_BUNDLE = """\
(function (modules) {
  var installed = {};
  function __webpack_require__(id) {
    if (installed[id]) return installed[id].exports;
    var module = installed[id] = { exports: {} };
    modules[id].call(module.exports, module, module.exports, __webpack_require__);
    return module.exports;
  }
  return __webpack_require__(0);
})([
  function (e, t, n) {
    var Foo = n(2);
    var missing = n(99);
    e.exports = function main() {
      return Foo(missing);
    };
  },
  function (e, t) {
    t.helper = 1;
  },
  function (module, exports, require) {
    function Foo(value) {
      return value;
    }
    module.exports = Foo;
  }
]);
"""


class FakeTTY(io.StringIO):
    """A stream that claims to be an interactive terminal."""

    def isatty(self) -> bool:
        return True


@pytest.fixture
def sample_bundle() -> str:
    return SAMPLE_BUNDLE


@pytest.fixture
def parse() -> Callable[[str], Node]:
    return parse_bundle


@pytest.fixture
def first_expression() -> Callable[[str], Node]:
    """Parse ``source`` and return the expression of its first statement."""

    def _first(source: str) -> Node:
        return parse_bundle(source)["body"][0]["expression"]

    return _first


@pytest.fixture
def estree() -> Callable[[Any], Any]:
    """Build :class:`Node` trees from hand-written ESTree dictionaries."""

    return from_estree


@pytest.fixture
def tty_stdin() -> FakeTTY:
    return FakeTTY()
