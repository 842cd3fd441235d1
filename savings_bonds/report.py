#!/usr/bin/env python3
"""CSV output of report rows."""

import csv
from typing import Iterable, TextIO

from savings_bonds.models import CSV_FIELDS, ReportRow


class ReportWriter:
    """Writes ReportRows as comma-separated lines, flushing after each row."""

    def __init__(self, stream: TextIO, header: bool = False):
        self.stream = stream
        self.writer = csv.writer(stream, lineterminator='\n')
        self.rows_written = 0
        if header:
            self.writer.writerow(CSV_FIELDS)

    def write(self, row: ReportRow):
        self.writer.writerow(row.as_list())
        self.stream.flush()
        self.rows_written += 1

    def write_all(self, rows: Iterable[ReportRow]) -> int:
        count = 0
        for row in rows:
            self.write(row)
            count += 1
        return count
