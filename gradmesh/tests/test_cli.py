"""Tests for the command line entry point."""
import matplotlib
matplotlib.use('Agg')  # Must be before pyplot import for headless rendering

import os

import pytest
from matplotlib import pyplot

from gradmesh._cli import build_parser, config_from_args, main


@pytest.fixture(autouse=True)
def cleanup_figures():
    yield
    pyplot.close('all')


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        cfg = config_from_args(args)
        assert cfg.node_count == 200
        assert cfg.initial_combo == 0
        assert cfg.draw_markers
        assert not cfg.draw_lines

    def test_flags(self):
        args = build_parser().parse_args(
            ['--nodes', '50', '--palette', '4', '--lines', '--no-markers',
             '--seed', '9'])
        cfg = config_from_args(args)
        assert cfg.node_count == 50
        assert cfg.initial_combo == 3
        assert cfg.draw_lines
        assert not cfg.draw_markers
        assert cfg.seed == 9

    def test_palette_out_of_range(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--palette', '10'])

    def test_negative_nodes_rejected(self):
        with pytest.raises(SystemExit):
            main(['--nodes', '-5', '--save', 'unused.gif'])


class TestSave:
    """Tests for headless rendering to a file."""

    def test_save_gif(self, tmp_path):
        path = str(tmp_path / "mesh.gif")
        assert main(['--nodes', '20', '--frames', '3', '--width', '2',
                     '--height', '1.5', '--dpi', '50', '--save', path]) == 0
        assert os.path.exists(path)
        assert os.path.getsize(path) > 0
