import io
import pytest

from currency_converter.menu.models import RateTable
from currency_converter.menu.views import MenuView


@pytest.fixture
def rates():
    return RateTable()


def make_view(*lines):
    """View fed from the given input lines, colours off so output can be matched exactly."""
    return MenuView(stream=io.StringIO("".join(f"{line}\n" for line in lines)), use_color=False)


@pytest.fixture
def view_factory():
    return make_view
