"""Tests for wallgen.core.report — census, text and JSON output."""

import json

import numpy as np
from wallgen.core.report import colour_census, format_json, format_text
from wallgen.core.types import RenderReport


def _report(**kwargs) -> RenderReport:
    base = dict(
        width=8,
        height=4,
        style='Bars',
        seed=42,
        output='out.png',
        shape_count=3,
        background='#000000',
        palette=['#FF0000', '#00FF00'],
        census=[{'hex': '#FF0000', 'pct': 75.0}, {'hex': '#000000', 'pct': 25.0}],
    )
    base.update(kwargs)
    return RenderReport(**base)


class TestColourCensus:
    def test_counts_and_order(self):
        canvas = np.array([[[255, 0, 0], [255, 0, 0], [0, 0, 0]]], dtype=np.uint8)
        assert colour_census(canvas) == [
            {'hex': '#FF0000', 'pct': 66.7},
            {'hex': '#000000', 'pct': 33.3},
        ]

    def test_top_limit(self):
        canvas = np.arange(30, dtype=np.uint8).reshape(1, 10, 3)
        assert len(colour_census(canvas, top=4)) == 4

    def test_empty_canvas(self):
        assert colour_census(np.zeros((0, 0, 3), dtype=np.uint8)) == []


class TestFormatText:
    def test_header(self):
        text = format_text(_report())
        assert text.splitlines()[0] == 'wallgen: Bars (8×4, 3 shapes) seed=42'

    def test_census_line(self):
        assert 'census: #FF0000:75.0%, #000000:25.0%' in format_text(_report())

    def test_output_written(self):
        assert 'wrote out.png' in format_text(_report())

    def test_no_output(self):
        assert 'no output file' in format_text(_report(output=None))


class TestFormatJson:
    def test_structure(self):
        parsed = json.loads(format_json(_report()))
        assert parsed['dimensions'] == {'width': 8, 'height': 4}
        assert parsed['style'] == 'Bars'
        assert parsed['shapes'] == 3
        assert parsed['seed'] == 42
        assert parsed['palette'] == ['#FF0000', '#00FF00']
        assert parsed['census'][0]['hex'] == '#FF0000'

    def test_no_output_is_null(self):
        assert json.loads(format_json(_report(output=None)))['output'] is None
