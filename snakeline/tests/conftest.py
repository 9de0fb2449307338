"""
Shared pytest fixtures for snakeline tests

Run from the repository root:
    pytest snakeline/tests/ -v
"""
import argparse
import pytest

from snakeline.config import LayoutConfig
from snakeline.layout import Entry, InteractionContext, LayoutEngine, Viewport


def make_entries(n, start_year=1960, prefix='c'):
    """n confirmed entries in placement order"""
    return [Entry(id=f"{prefix}{i}", year=start_year + i) for i in range(n)]


@pytest.fixture
def entries_factory():
    """Factory for entry lists"""
    return make_entries


@pytest.fixture
def engine():
    """Engine with default configuration"""
    return LayoutEngine(LayoutConfig())


@pytest.fixture
def viewport():
    """The 800x600 board used throughout the tests"""
    return Viewport(800, 600)


@pytest.fixture
def my_turn():
    """Active player choosing a slot"""
    return InteractionContext(is_my_turn=True, phase='player-turn')


@pytest.fixture
def six_layout(engine, viewport):
    """Two full rows in an 800x600 viewport"""
    return engine.calculate_layout(make_entries(6), viewport)


@pytest.fixture
def entries_tsv(tmp_path):
    """Entry table with a pending card"""
    path = tmp_path / "timeline.tsv"
    path.write_text(
        "id\tyear\tpending\n"
        "c0\t1969\tno\n"
        "c1\t1984\tno\n"
        "c2\t1991\tyes\n"
        "c3\t1999\tno\n"
        "c4\t2012\tno\n"
    )
    return path


@pytest.fixture
def cli_parser():
    """Top-level parser with all subcommands registered"""
    from snakeline.cli import layout, plot

    parser = argparse.ArgumentParser(prog='snakeline')
    subparsers = parser.add_subparsers(dest='command')
    layout.add_parser(subparsers)
    plot.add_parser(subparsers)
    return parser


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual layout components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running the command line tools"
    )
