#!/usr/bin/env python3
"""
Batch processor for rendered song pages

Converts every HTML file under a directory, writes the converted pages to an
output directory (same relative paths), and produces statistics.
"""

import argparse
import json
import logging
import os
import shutil
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .config import PageConfig
from .errors import ConfigError
from .page import PageResult, PageTransformer

_LOG = logging.getLogger(__name__)


class BatchProcessor:
    """Processes HTML pages in batch"""

    def __init__(self, input_dir: str, output_dir: str, config: Optional[PageConfig] = None):
        self.input_dir = Path(input_dir)
        self.output_dir = Path(output_dir)
        self.transformer = PageTransformer(config)

        # Track statistics
        self.stats = {
            'total_files': 0,
            'converted_files': 0,
            'unchanged_files': 0,
            'failed_files': [],
            'paragraphs_seen': 0,
            'blocks': {},
        }

    def find_html_files(self) -> List[Path]:
        """
        Find all HTML files in input directory, sorted for a stable order

        Files under the output directory are skipped so reruns do not pick up
        earlier results when the output lives inside the input tree.
        """
        output_root = self.output_dir.resolve()
        html_files = []
        for file_path in self.input_dir.rglob('*.html'):
            if output_root in file_path.resolve().parents:
                continue
            html_files.append(file_path)
        return sorted(html_files)

    def process_file(self, file_path: Path) -> Tuple[Optional[PageResult], Optional[str]]:
        """
        Process a single HTML file

        Returns: (PageResult or None, error message or None)
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                html_content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            return None, f"Failed to read file: {e}"

        return self.transformer.transform(html_content), None

    def save_output(self, result: PageResult, file_path: Path) -> Path:
        """Write converted page, mirroring its path under the input directory"""
        output_path = self.output_dir / file_path.relative_to(self.input_dir)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if not result.total_converted:
            # Nothing converted: keep the original bytes
            shutil.copyfile(file_path, output_path)
            return output_path
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(result.html)
        return output_path

    def process_batch(self, limit: Optional[int] = None) -> dict:
        """
        Process all HTML files in batch

        Args:
            limit: Optional limit on number of files to process (for testing)

        Returns: Statistics dictionary
        """
        html_files = self.find_html_files()

        if limit:
            html_files = html_files[:limit]

        self.stats['total_files'] = len(html_files)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        for i, file_path in enumerate(html_files, 1):
            _LOG.debug("[%d/%d] %s", i, len(html_files), file_path)

            result, error = self.process_file(file_path)

            if error:
                _LOG.warning("%s: %s", file_path.name, error)
                self.stats['failed_files'].append({
                    'file': str(file_path.relative_to(self.input_dir)),
                    'error': error
                })
                continue

            self.stats['paragraphs_seen'] += result.paragraphs_seen
            for kind, count in result.converted.items():
                self.stats['blocks'][kind] = self.stats['blocks'].get(kind, 0) + count

            if result.total_converted:
                self.stats['converted_files'] += 1
            else:
                self.stats['unchanged_files'] += 1

            try:
                self.save_output(result, file_path)
            except OSError as e:
                self.stats['failed_files'].append({
                    'file': str(file_path.relative_to(self.input_dir)),
                    'error': f"Failed to write output: {e}"
                })

        return self.stats

    def print_report(self):
        """Print processing report"""
        print("\n" + "=" * 70)
        print("BATCH CONVERSION REPORT")
        print("=" * 70)

        print(f"\nFiles Processed: {self.stats['total_files']}")
        print(f"  With blocks: {self.stats['converted_files']}")
        print(f"  Unchanged: {self.stats['unchanged_files']}")
        print(f"  Failed: {len(self.stats['failed_files'])}")

        print(f"\nParagraphs scanned: {self.stats['paragraphs_seen']}")
        print(f"Blocks converted:")
        for kind, count in sorted(self.stats['blocks'].items()):
            print(f"  {kind}: {count}")

        if self.stats['failed_files']:
            print(f"\nFailed Files (showing first 10):")
            for failure in self.stats['failed_files'][:10]:
                print(f"  {failure['file']}: {failure['error']}")

        print(f"\nOutput written to: {self.output_dir}")

    def save_report(self, report_file: str):
        """Save detailed statistics to JSON file"""
        with open(report_file, 'w', encoding='utf-8') as f:
            json.dump(self.stats, f, indent=2, ensure_ascii=False)
        print(f"\nDetailed report saved to: {report_file}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Convert {lyrics} and {instrument} blocks in rendered HTML pages'
    )
    parser.add_argument(
        'input_dir',
        help='Directory containing HTML files to process'
    )
    parser.add_argument(
        '-o', '--output-dir',
        default='converted',
        help='Directory for converted HTML files (default: converted/)'
    )
    parser.add_argument(
        '-c', '--config',
        help='YAML page configuration (container selector, paragraph tag)'
    )
    parser.add_argument(
        '-r', '--report',
        help='Optional JSON file for detailed statistics'
    )
    parser.add_argument(
        '-l', '--limit',
        type=int,
        help='Limit number of files to process (for testing)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    # Check input directory exists
    if not os.path.isdir(args.input_dir):
        print(f"Error: Input directory not found: {args.input_dir}")
        return 1

    try:
        config = PageConfig.load(args.config) if args.config else PageConfig()
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    processor = BatchProcessor(
        input_dir=args.input_dir,
        output_dir=args.output_dir,
        config=config,
    )

    print(f"Input directory: {args.input_dir}")
    print(f"Output directory: {args.output_dir}")
    if args.limit:
        print(f"Processing limit: {args.limit} files")

    processor.process_batch(limit=args.limit)

    processor.print_report()
    if args.report:
        processor.save_report(args.report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
