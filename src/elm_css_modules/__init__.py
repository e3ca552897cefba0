"""
elm-css-modules Package.

Rewrites the CSS module declarations emitted by the Elm compiler for
`cultureamp/elm-css-modules-loader` into module-loading lookups, so the bundler
resolves each CSS file and its hashed class names.

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import elm_css_modules as ecm
    code = 'A2(tagger, "./Main.css", {xx: "someClass"})'
    print(ecm.transform(code, tagger_name="tagger"))
    # A2(tagger, "./Main.css", {xx: require("./Main.css")["someClass"]})

Advanced Usage (Engine)
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from elm_css_modules import CssModulesEngine, TransformConfig

    engine = CssModulesEngine(TransformConfig(tagger_name="tagger"))
    res = engine.run(code)

    if res.success:
        print(res.code)
    else:
        print(res.report)
"""

from typing import Optional

from elm_css_modules.config import DEFAULT_LOADER_NAME, DEFAULT_TAGGER_NAME, TransformConfig
from elm_css_modules.core.diagnostics import CssModulesError, Diagnostic
from elm_css_modules.core.engine import CssModulesEngine, TransformResult
from elm_css_modules.core.transformer import CssModulesTransformer

__version__ = "0.0.1"


def transform(
  code: str,
  tagger_name: Optional[str] = None,
  loader_name: Optional[str] = None,
) -> str:
  """
  Rewrites all CSS module expressions in a string of source code.

  Args:
      code (str): The source code to transform.
      tagger_name (str, optional): Identifier of the generated tagger.
          Defaults to the compiled name used by `cultureamp/elm-css-modules-loader`.
      loader_name (str, optional): Module loader function. Defaults to ``require``.

  Returns:
      str: The rewritten source code.

  Raises:
      CssModulesError: If any class map entry was empty or malformed.
      libcst.ParserSyntaxError: If the input cannot be parsed.
  """
  config = TransformConfig(
    tagger_name=tagger_name or DEFAULT_TAGGER_NAME,
    loader_name=loader_name or DEFAULT_LOADER_NAME,
  )
  result = CssModulesEngine(config).run(code)
  result.raise_for_diagnostics()
  return result.code


__all__ = [
  "CssModulesEngine",
  "CssModulesError",
  "CssModulesTransformer",
  "DEFAULT_TAGGER_NAME",
  "Diagnostic",
  "TransformConfig",
  "TransformResult",
  "transform",
  "__version__",
]
