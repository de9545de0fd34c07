"""Pytest fixtures for groupdata tests."""

from pathlib import Path
from typing import List

import pytest

from groupdata.schema import DeclarationNode

SAMPLE_IDL = """
[Exposed=Window]
interface Foo {
  attribute long size;
  long reset();
};

dictionary Bar {
  long width = 0;
};

enum Mode { "fast", "slow" };

typedef (DOMString or long) Key;

callback Handler = any (long code);
"""

SPEC_HTML = """
<html>
  <head><title>Example Spec</title></head>
  <body>
    <p>Intro text.</p>
    <pre class="idl">interface Foo {
  attribute long size;
};</pre>
    <div class="example">
      <pre class="idl">interface ExampleOnly {};</pre>
    </div>
    <pre class="idl extract">interface Extracted {};</pre>
    <pre class="def idl"><span class="idlHeader">WebIDL</span>dictionary Bar {
  long width;
};</pre>
  </body>
</html>
"""


def nodes(*pairs) -> List[DeclarationNode]:
    return [DeclarationNode(kind=kind, name=name) for kind, name in pairs]


@pytest.fixture
def make_nodes():
    return nodes


@pytest.fixture
def sample_idl() -> str:
    return SAMPLE_IDL


@pytest.fixture
def spec_html() -> str:
    return SPEC_HTML


@pytest.fixture
def idl_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.webidl"
    path.write_text(SAMPLE_IDL, encoding="utf-8")
    return path


@pytest.fixture
def mixed_nodes() -> List[DeclarationNode]:
    return nodes(
        ("interface", "Zeta"),
        ("dictionary", "Options"),
        ("interface", "Alpha"),
        ("typedef", "Size"),
        ("enum", "Mode"),
        ("callback", "Handler"),
        ("exception", "BadThing"),
        ("eof", None),
    )
