"""
I/O Writers

Writes layout results as TSV tables and a standalone SVG.
"""

from typing import Dict, Tuple
from xml.sax.saxutils import quoteattr
import pandas as pd
import numpy as np
from pathlib import Path
import logging

from ..layout.path import to_svg_path
from ..layout.types import LayoutResult

logger = logging.getLogger(__name__)

SLOT_COLUMNS = ['index', 'x', 'y', 'curve_shift', 'display_x', 'selectable', 'visible', 'state']
YEAR_COLUMNS = ['entry_id', 'year', 'x', 'y', 'row', 'state']


def layout_frames(result: LayoutResult) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Slot and year tables for a layout

    Args:
        result: Layout to tabulate

    Returns:
        Tuple of (slots_df, years_df)
    """
    slots = pd.DataFrame(
        [{
            'index': slot.index,
            'x': slot.x,
            'y': slot.y,
            'curve_shift': slot.curve_shift,
            'display_x': slot.display_x,
            'selectable': slot.selectable,
            'visible': slot.visible,
            'state': slot.state,
        } for slot in result.slots],
        columns=SLOT_COLUMNS,
    )
    years = pd.DataFrame(
        [{
            'entry_id': marker.entry_id,
            'year': marker.year,
            'x': marker.x,
            'y': marker.y,
            'row': marker.row,
            'state': marker.state,
        } for marker in result.years],
        columns=YEAR_COLUMNS,
    )
    return slots, years


class TSVWriter:
    """Writes slot and year tables"""

    def __init__(self, precision: int = 3):
        """
        Initialize TSV writer

        Args:
            precision: Decimal places kept for coordinates
        """
        self.precision = precision

    def write(self, result: LayoutResult, slots_file: str, years_file: str) -> None:
        """
        Write both tables

        Args:
            result: Layout to write
            slots_file: Output path for the slots table
            years_file: Output path for the years table
        """
        slots, years = layout_frames(result)
        coord_cols = ['x', 'y', 'curve_shift', 'display_x']
        slots[coord_cols] = np.round(slots[coord_cols].astype(float), self.precision)
        years[['x', 'y']] = np.round(years[['x', 'y']].astype(float), self.precision)

        for output_file, frame in ((slots_file, slots), (years_file, years)):
            Path(output_file).parent.mkdir(parents=True, exist_ok=True)
            frame.to_csv(output_file, sep='\t', index=False)

        logger.info(f"Wrote {len(slots)} slots to {slots_file}")
        logger.info(f"Wrote {len(years)} years to {years_file}")


class SVGWriter:
    """Writes the track, guides and markers as a standalone SVG document"""

    def __init__(self, stroke: str = '#4a5568', stroke_width: float = 16.0, guide_width: float = 3.0):
        self.stroke = stroke
        self.stroke_width = stroke_width
        self.guide_width = guide_width

    def render(self, result: LayoutResult) -> str:
        """SVG document for a layout"""
        width = result.viewport.width
        height = result.viewport.height
        scale = result.scale
        lines = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{width:g}" height="{height:g}" '
            f'viewBox="0 0 {width:g} {height:g}">',
        ]

        if result.path:
            lines.append(
                f'  <path d={quoteattr(to_svg_path(result.path))} fill="none" stroke="{self.stroke}" '
                f'stroke-width="{self.stroke_width * scale:.3f}" stroke-linecap="round" '
                f'stroke-linejoin="round" opacity="0.7"/>'
            )

        for guide in result.guides:
            style = 'stroke-dasharray="5,5" opacity="0.2"' if guide.fading else 'opacity="0.4"'
            lines.append(
                f'  <line x1="{guide.x0:.3f}" y1="{guide.y0:.3f}" x2="{guide.x1:.3f}" y2="{guide.y1:.3f}" '
                f'stroke="{self.stroke}" stroke-width="{self.guide_width * scale:.3f}" {style}/>'
            )

        for slot in result.slots:
            if not slot.visible:
                continue
            lines.append(
                f'  <circle cx="{slot.display_x:.3f}" cy="{slot.y:.3f}" r="{12 * scale:.3f}" '
                f'class="slot slot-{slot.state}" data-index="{slot.index}"/>'
            )

        for marker in result.years:
            lines.append(
                f'  <text x="{marker.x:.3f}" y="{marker.y:.3f}" text-anchor="middle" '
                f'dominant-baseline="central" class="year year-{marker.state}" '
                f'data-entry={quoteattr(str(marker.entry_id))}>{marker.year}</text>'
            )

        lines.append('</svg>')
        return '\n'.join(lines) + '\n'

    def write(self, result: LayoutResult, output_file: str) -> None:
        """Write the SVG document"""
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, 'w') as f:
            f.write(self.render(result))
        logger.info(f"Wrote track SVG to {output_file}")


def write_layout(result: LayoutResult, output_dir: str, prefix: str) -> Dict[str, str]:
    """
    Convenience function to write all layout outputs

    Args:
        result: Layout to write
        output_dir: Output directory
        prefix: File name prefix

    Returns:
        Dict mapping 'slots', 'years', 'svg' to the written paths
    """
    out = Path(output_dir)
    files = {
        'slots': str(out / f"{prefix}.snakeline_slots.tsv"),
        'years': str(out / f"{prefix}.snakeline_years.tsv"),
        'svg': str(out / f"{prefix}.snakeline_path.svg"),
    }
    TSVWriter().write(result, files['slots'], files['years'])
    SVGWriter().write(result, files['svg'])
    return files
