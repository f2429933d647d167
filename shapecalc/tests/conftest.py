import io

import pytest

from ..cli import ShapeCalculatorCLI


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "group_shape: marks tests related to shape functionality")
    config.addinivalue_line("markers", "group_square: marks tests related to square functionality")
    config.addinivalue_line("markers", "group_rectangle: marks tests related to rectangle functionality")
    config.addinivalue_line("markers", "group_circle: marks tests related to circle functionality")
    config.addinivalue_line("markers", "group_triangle: marks tests related to triangle functionality")
    config.addinivalue_line("markers", "group_validation: marks tests related to dimension checks")
    config.addinivalue_line("markers", "group_cli: marks tests related to the interactive menu")
    config.addinivalue_line("markers", "group_config: marks tests related to settings and logging")


@pytest.fixture
def session():
    """Run a scripted menu session and return (exit code, printed output)."""
    def run(*lines):
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        code = ShapeCalculatorCLI(stdin=stdin, stdout=stdout).run()
        return code, stdout.getvalue()
    return run
