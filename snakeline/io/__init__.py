"""I/O utilities for snakeline"""

from .readers import EntryReader, read_entries
from .writers import TSVWriter, SVGWriter, layout_frames, write_layout

__all__ = [
    'EntryReader', 'read_entries',
    'TSVWriter', 'SVGWriter',
    'layout_frames', 'write_layout']
