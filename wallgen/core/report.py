"""Report builder — text and JSON output for a finished render."""

import json
from typing import Any

import numpy as np

from wallgen.core.colour import format_colour
from wallgen.core.types import RenderReport


def colour_census(canvas: np.ndarray, top: int = 5) -> list[dict[str, Any]]:
    """Most common colours on the canvas with their share of pixels."""
    pixels = canvas.reshape(-1, 3)
    if len(pixels) == 0:
        return []
    unique, counts = np.unique(pixels, axis=0, return_counts=True)
    order = np.argsort(-counts, kind='stable')[:top]
    total = float(counts.sum())
    result = []
    for i in order:
        r, g, b = (int(c) for c in unique[i])
        result.append({'hex': format_colour((r, g, b)), 'pct': round(float(counts[i]) / total * 100.0, 1)})
    return result


def format_text(report: RenderReport) -> str:
    """Format report as human-readable text."""
    lines = []
    dim = f'{report.width}×{report.height}'
    header = f'wallgen: {report.style} ({dim}, {report.shape_count} shapes)'
    if report.seed is not None:
        header += f' seed={report.seed}'
    lines.append(header)
    lines.append(f'  background: {report.background}')
    lines.append(f'  palette: {", ".join(report.palette)}')
    if report.census:
        parts = [f'{c["hex"]}:{c["pct"]:.1f}%' for c in report.census]
        lines.append(f'  census: {", ".join(parts)}')
    if report.output:
        lines.append(f'  wrote {report.output}')
    else:
        lines.append('  no output file')
    return '\n'.join(lines)


def format_json(report: RenderReport) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'style': report.style,
        'dimensions': {'width': report.width, 'height': report.height},
        'shapes': report.shape_count,
        'seed': report.seed,
        'background': report.background,
        'palette': report.palette,
        'census': report.census,
        'output': report.output,
    }
    return json.dumps(obj, indent=2)
