"""
Tests for the package-level `transform` convenience function.
"""

import pytest

import elm_css_modules as ecm


def test_transform_rewrites_class_map():
  code = 'css = A2(tag, "./Main.css", {xx: "someClass"})\n'
  assert ecm.transform(code, tagger_name="tag") == 'css = A2(tag, "./Main.css", {xx: require("./Main.css")["someClass"]})\n'


def test_transform_uses_loader_name():
  code = 'A2(tag, "./Main.css", {xx: "a"})\n'
  assert 'load("./Main.css")["a"]' in ecm.transform(code, tagger_name="tag", loader_name="load")


def test_transform_raises_aggregated_error():
  code = """a = A2(tag, "./A.css", {x: ""})
b = A2(tag, "./B.css", {y: ""})
"""
  with pytest.raises(ecm.CssModulesError) as excinfo:
    ecm.transform(code, tagger_name="tag")

  message = str(excinfo.value)
  assert message.startswith("elm-css-modules-plugin:\n\t")
  assert "module './A.css' with key 'x' contained an empty string (1,27)" in message
  assert "module './B.css' with key 'y' contained an empty string (2,27)" in message
  assert message.index("'./A.css'") < message.index("'./B.css'")


def test_transform_without_targets_is_identity():
  code = "x = foo(1, 2)\n"
  assert ecm.transform(code, tagger_name="tag") == code


def test_public_exports():
  for name in ecm.__all__:
    assert hasattr(ecm, name)


def test_successful_transform_prints_nothing(capsys):
  ecm.transform('A2(tag, "./Main.css", {xx: "someClass"})\n', tagger_name="tag")

  captured = capsys.readouterr()
  assert captured.out == ""
  assert captured.err == ""
