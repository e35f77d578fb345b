import pytest
import os
import shutil
import subprocess
import tempfile

from shapeforge import CommandQueue, SdfRegistry

GLSL_VALIDATOR = shutil.which("glslangValidator")
SKIP_GLSL = os.environ.get("SKIP_GLSL", "") == "1"

requires_glsl_validator = pytest.mark.skipif(
    not GLSL_VALIDATOR or SKIP_GLSL,
    reason="Requires glslangValidator."
)

@pytest.fixture
def queue():
    return CommandQueue()

@pytest.fixture
def registry(queue):
    """A registry wired to an in-process command queue."""
    return SdfRegistry(queue)

@pytest.fixture(scope="session")
def validate_glsl():
    def _validator(shader_source: str):
        with tempfile.NamedTemporaryFile(suffix=".frag", mode="w", delete=False) as f:
            f.write(shader_source)
            path = f.name
        try:
            result = subprocess.run([GLSL_VALIDATOR, "-S", "frag", path], capture_output=True, text=True)
        finally:
            os.remove(path)
        if result.returncode != 0:
            raise AssertionError(f"GLSL Validation Failed:\n{result.stdout}{result.stderr}\nSOURCE:\n{shader_source}")
    return _validator
