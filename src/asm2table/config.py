"""
asm2table - Report Configuration
================================

Options controlling how per-line results are rendered. Configuration can
come from:
- Default values (defined here)
- Environment variables (ReportConfig.from_env)
- Command-line options, which override both

The instruction tables themselves are not configurable at runtime; they are
compiled into asm2table.cpu.mcs51.
"""

from dataclasses import dataclass
import os


@dataclass
class ReportConfig:
    """
    Rendering options for line reports.

    Attributes:
        failure_marker: Text shown for a byte length or cycle cost that could
            not be resolved (default: "-1")
        mode_separator: Joins addressing-mode names in one cell (default: ", ")
        encoding: Encoding used to read source files (default: "utf-8")
        csv_header: Write a header row to CSV output (default: False)
    """

    failure_marker: str = "-1"
    mode_separator: str = ", "
    encoding: str = "utf-8"
    csv_header: bool = False

    @classmethod
    def from_env(cls) -> "ReportConfig":
        """
        Create ReportConfig from environment variables.

        Environment variables (all optional):
            ASM2TABLE_FAILURE_MARKER: failure_marker
            ASM2TABLE_MODE_SEPARATOR: mode_separator
            ASM2TABLE_ENCODING: encoding
            ASM2TABLE_CSV_HEADER: csv_header ("1", "true" or "yes" enable it)
        """
        config = cls()

        if "ASM2TABLE_FAILURE_MARKER" in os.environ:
            config.failure_marker = os.environ["ASM2TABLE_FAILURE_MARKER"]
        if "ASM2TABLE_MODE_SEPARATOR" in os.environ:
            config.mode_separator = os.environ["ASM2TABLE_MODE_SEPARATOR"]
        if "ASM2TABLE_ENCODING" in os.environ:
            config.encoding = os.environ["ASM2TABLE_ENCODING"]
        if "ASM2TABLE_CSV_HEADER" in os.environ:
            config.csv_header = os.environ["ASM2TABLE_CSV_HEADER"].lower() in ("1", "true", "yes")

        return config
