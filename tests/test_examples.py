import importlib.util
import sys
from pathlib import Path

import pytest

EXAMPLES_FOLDER = Path(__file__).parent.parent / "examples"

examples = sorted(EXAMPLES_FOLDER.glob("*.py"))


def _run_example(file_path: Path):
    # the module must be in sys.modules while it runs, to resolve forward references
    module_name = "beanwire_" + file_path.stem.replace("-", "_")
    spec = importlib.util.spec_from_file_location(module_name, file_path)
    module = importlib.util.module_from_spec(spec)  # type: ignore
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)  # type: ignore
    finally:
        del sys.modules[module_name]
    return module


def test_examples_are_found():
    assert examples


@pytest.mark.parametrize("file_path", examples, ids=lambda path: path.name)
def test_example(file_path: Path):
    # assertions are in the examples themselves
    module = _run_example(file_path)

    assert module.__doc__, f"{file_path.name} should describe what it illustrates"
