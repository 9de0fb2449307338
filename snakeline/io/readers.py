"""
I/O Readers

Reads entry tables for the command line tools.
"""

from __future__ import annotations
from typing import List
import pandas as pd
from pathlib import Path
import logging

from ..layout.types import Entry
from ..types import EntryRecord, PathLike

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ('id', 'year')
VALID_ROLES = ('original', 'challenger')
TRUE_VALUES = ('1', 'true', 'yes', 'y')


class EntryReader:
    """Reads a player's timeline from TSV"""

    @staticmethod
    def read_frame(filepath: PathLike) -> pd.DataFrame:
        """
        Load and validate the raw entry table

        Expected format (placement order, header required):
        id      year  pending  role
        c-0412  1984  no
        c-0077  1999  yes

        Args:
            filepath: Path to TSV file

        Returns:
            DataFrame with 'id', 'year', 'pending', 'role' columns
        """
        if not Path(filepath).exists():
            raise FileNotFoundError(f"Entry file not found: {filepath}")

        frame: pd.DataFrame = pd.read_csv(filepath, sep='\t', comment='#', dtype=str)
        frame.columns = [str(col).strip().lower() for col in frame.columns]

        missing = [col for col in REQUIRED_COLUMNS if col not in frame.columns]
        if missing:
            raise ValueError(f"{filepath}: missing column(s) {', '.join(missing)}")

        frame['id'] = frame['id'].fillna('').astype(str).str.strip()
        blank = frame['id'] == ''
        if blank.any():
            rows = [str(i + 2) for i in frame.index[blank]]
            raise ValueError(f"{filepath}: blank entry id on line(s) {', '.join(rows)}")

        duplicated = frame['id'][frame['id'].duplicated()].unique().tolist()
        if duplicated:
            raise ValueError(f"{filepath}: duplicate entry id(s) {', '.join(map(str, duplicated))}")

        frame['year'] = pd.to_numeric(frame['year'], errors='coerce')
        bad_years = frame['year'].isna()
        if bad_years.any():
            logger.warning(f"Dropping {int(bad_years.sum())} entries without a numeric year")
            frame = frame[~bad_years].copy()
        frame['year'] = frame['year'].astype(int)

        if 'pending' in frame.columns:
            frame['pending'] = frame['pending'].astype(str).str.strip().str.lower().isin(TRUE_VALUES)
        else:
            frame['pending'] = False

        if 'role' not in frame.columns:
            frame['role'] = None
        frame['role'] = frame['role'].where(frame['role'].isin(VALID_ROLES), None)

        return frame.reset_index(drop=True)

    @staticmethod
    def read(filepath: PathLike) -> List[Entry]:
        """
        Read entries in placement order

        Args:
            filepath: Path to TSV file

        Returns:
            List of Entry objects
        """
        frame = EntryReader.read_frame(filepath)
        records: List[EntryRecord] = frame.to_dict('records')  # type: ignore
        entries = [
            Entry(
                id=row['id'],
                year=int(row['year']),
                pending=bool(row['pending']),
                role=row['role'] if isinstance(row['role'], str) else None,
            )
            for row in records
        ]
        logger.debug(f"Read {len(entries)} entries from {filepath}")
        return entries


def read_entries(filepath: PathLike) -> List[Entry]:
    """
    Convenience function to read an entry table

    Args:
        filepath: Path to TSV file

    Returns:
        List of Entry objects
    """
    return EntryReader.read(filepath)
