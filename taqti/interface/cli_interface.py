# taqti/interface/cli_interface.py

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from config.config_manager import ConfigManager
from taqti.core.service import AnalysisService
from taqti.models.record import AnalysisRecord
from taqti.models.report import PoemReport
from .base_interface import BaseInterface


def render_report(report: PoemReport) -> str:
    """Render a report as a plain-text table"""
    lines: List[str] = []

    if not report.is_success:
        lines.append(f"❌ {report.message}")
        for validity in report.line_validity:
            mark = "✅" if validity.valid else "❌"
            lines.append(f"  {mark} {validity.line_number:>3}  {validity.text}")
        if report.error_message and not report.line_validity:
            lines.append(f"  {report.error_message}")
        return "\n".join(lines)

    lines.append(f"✅ {report.message}")
    lines.append(f"   {report.bahr_type}")
    lines.append(f"   {report.meter_description}")
    lines.append(f"   Pattern: {' '.join(report.pattern)}  "
                 f"({report.match.kind.value}, confidence {report.confidence:.2f})")
    if report.consistency:
        lines.append(f"   Consistency: {report.consistency.kind}")
    lines.append("-" * 50)

    for line in report.lines:
        lines.append(f"{line.line_number:>3}  {line.text}")
        lines.append(f"     {' | '.join(line.syllable_texts)}")
        lines.append(f"     {' | '.join(line.weight_strings)}   "
                     f"[{line.total_syllables} syllables, {line.total_matras} matras]")
        sections = "  ".join(
            f"{section.name}: {' '.join(section.syllables)} ({''.join(section.weights)})"
            for section in line.sections
        )
        lines.append(f"     {sections}")

    if report.alternatives:
        lines.append("-" * 50)
        lines.append("Alternatives:")
        for alternative in report.alternatives:
            lines.append(f"   {alternative.display_name} {alternative.pattern} "
                         f"({alternative.confidence:.2f})")

    return "\n".join(lines)


class CLIInterface(BaseInterface):
    """Command-line front end: analyze a poem or list stored analyses."""

    def __init__(self, config: ConfigManager, args: argparse.Namespace):
        super().__init__(config)
        self.args = args
        self.service = AnalysisService.from_config(config, persist=not getattr(args, "no_store", False))

    def run(self) -> int:
        """Run the selected command."""
        if self.args.command == "analyze":
            return self._analyze()
        if self.args.command == "history":
            return self._history()
        self.logger.error(f"Unknown command: {self.args.command}")
        return 2

    def _read_text(self) -> Optional[str]:
        if self.args.text is not None:
            return self.args.text
        try:
            return Path(self.args.file).read_text(encoding="utf-8")
        except OSError as e:
            print(f"Error reading {self.args.file}: {e}", file=sys.stderr)
            return None

    def _analyze(self) -> int:
        text = self._read_text()
        if text is None:
            return 1

        record: AnalysisRecord = self.service.check_bahr(text)

        if self.args.json:
            print(json.dumps(record.to_dict(), ensure_ascii=False, indent=2))
        else:
            print(render_report(record.result))
            if record.enrichment:
                print(f"\n🔎 External match: {record.enrichment.meter_name}")

        return 0 if record.result.is_success else 1

    def _history(self) -> int:
        listing: Dict[str, Any] = self.service.list_analyses(limit=self.args.limit, page=self.args.page)

        if self.args.json:
            print(json.dumps(listing, ensure_ascii=False, indent=2))
            return 0 if listing.get("status") == "success" else 1

        if listing.get("status") != "success":
            print(f"❌ {listing.get('message')}")
            return 1

        print(f"📚 Page {listing['page']} of {listing['totalPages']} ({listing['total']} analyses)")
        for entry in listing["data"]:
            result = entry.get("result", {})
            first_line = entry.get("text", "").splitlines()[0] if entry.get("text") else ""
            print(f"  {entry.get('timestamp', '')}  {entry.get('analyzerUsed', ''):<17} "
                  f"{result.get('status', ''):<8} {result.get('bahrType') or '-'}  {first_line}")
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taqti",
        description="Taqti - Hindi / Hinglish Bahr Analyzer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a couplet
  python taqti.py analyze --text "हर एक बात पे कहते हो तुम कि तू क्या है"

  # Analyze a file and print JSON
  python taqti.py analyze --file ghazal.txt --json

  # Show the latest stored analyses
  python taqti.py history --limit 10
        """
    )
    parser.add_argument("-c", "--config", type=str, default=None,
                        help="Path to configuration file (default: config/default_config.yaml)")
    parser.add_argument("--version", action="version", version="Taqti 1.0.0")

    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser("analyze", help="Analyze the bahr of a poem")
    source = analyze_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-t", "--text", type=str, help="Poem text, lines separated by newlines")
    source.add_argument("-f", "--file", type=str, help="File containing the poem")
    analyze_parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    analyze_parser.add_argument("--no-store", action="store_true", help="Do not store the analysis")

    history_parser = subparsers.add_parser("history", help="List stored analyses")
    history_parser.add_argument("--limit", type=int, default=20, help="Analyses per page (default: 20)")
    history_parser.add_argument("--page", type=int, default=1, help="Page number (default: 1)")
    history_parser.add_argument("--json", action="store_true", help="Print the listing as JSON")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "history" and (args.limit < 1 or args.page < 1):
        parser.error("--limit and --page must be positive")

    config = ConfigManager(args.config)
    with CLIInterface(config, args) as interface:
        return interface.run()


if __name__ == "__main__":
    sys.exit(main())
