"""Converted-amounts report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from mixedunits.config import CURRENCY_CODE
from mixedunits.models.entries import NormalizedEntry
from mixedunits.models.enums import ReportFormat

TEMPLATE_DIR = Path(__file__).parent / "templates"


class ResultsReportGenerator:
    """Renders normalized entries as a text or HTML listing."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(self, entries: list[NormalizedEntry], fmt: ReportFormat = ReportFormat.TXT) -> str:
        """Render the results report using the template for *fmt*."""
        template = self.env.get_template(f"results.{fmt.value}")
        return template.render(
            entries=entries,
            currency=CURRENCY_CODE,
            key_width=max((len(e.key) for e in entries), default=3),
        )
