import htmlspanner
from htmlspanner.version import get_version


def test_version_is_exposed() -> None:
    assert isinstance(htmlspanner.__version__, str)
    assert htmlspanner.__version__ == get_version()
