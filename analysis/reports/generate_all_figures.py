#!/usr/bin/env python3
"""
Generate All Survey Figures

Loads the coded survey, cleans and validates it, then writes every requested
bar chart, mosaic plot and Sankey diagram.

Usage:
    python -m analysis.reports.generate_all_figures --input data/raw/survey.xlsx \\
        --bar role --mosaic role:need --sankey role:need

    # Only keep links with at least 2 responses, reproducible colors
    python -m analysis.reports.generate_all_figures --sankey role:need \\
        --min-weight 2 --seed 42 --target-group Need
"""

import sys
import argparse
import time
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import seaborn as sns

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from config.paths import DEFAULT_SURVEY_FILE, FIGURES
from config.settings import (
    DEFAULT_PALETTE, DEFAULT_TARGET_COLOR, DEFAULT_TARGET_GROUP,
    FIGURE_DPI, SEABORN_STYLE, STATIC_FORMATS, INTERACTIVE_FORMATS
)
from data_engineering.loading import load_survey
from data_engineering.cleaning import clean_survey, explode_multi_select
from data_engineering.utils.validation import validate_survey_dataset
from analysis.sankey import build_sankey_data, export_sankey_json
from analysis.visualization import (
    create_sankey_figure, save_figure, plot_category_counts, plot_mosaic
)

sns.set_style(SEABORN_STYLE)


def parse_pair(text: str) -> Tuple[str, str]:
    """'role:need' -> ('role', 'need')"""
    parts = text.split(':')
    if len(parts) != 2 or not all(p.strip() for p in parts):
        raise argparse.ArgumentTypeError(f'expected LEFT:RIGHT, got {text!r}')
    return parts[0].strip(), parts[1].strip()


def save_matplotlib(fig, output_path: Path) -> Path:
    """Save and close a matplotlib figure"""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=FIGURE_DPI, bbox_inches='tight')
    plt.close(fig)
    return output_path


def make_bar_chart(df, column: str, output_dir: Path, image_format: str = 'png',
                   top_n: Optional[int] = None) -> Path:
    fig = plot_category_counts(df, column, top_n=top_n)
    return save_matplotlib(fig, output_dir / 'bar_charts' / f'{column}_counts.{image_format}')


def make_mosaic(df, x: str, y: str, output_dir: Path, image_format: str = 'png') -> Path:
    fig = plot_mosaic(df, x, y)
    return save_matplotlib(fig, output_dir / 'mosaic' / f'{x}_vs_{y}.{image_format}')


def make_sankey(df, left: str, right: str, output_dir: Path, fmt: str = 'html',
                min_weight: Optional[int] = None,
                target_group: Optional[str] = DEFAULT_TARGET_GROUP,
                target_color: Optional[str] = None,
                merge_shared_labels: bool = False,
                palette: str = DEFAULT_PALETTE,
                seed: Optional[int] = None,
                export_json: bool = False) -> Path:
    """
    Build and save one Sankey diagram

    Returns:
        Path of the saved figure
    """
    sankey = build_sankey_data(
        df, left=left, right=right,
        min_weight=min_weight,
        target_group=target_group,
        target_color=target_color,
        merge_shared_labels=merge_shared_labels,
        palette=palette,
        rng=seed
    )

    print(f'  {len(sankey.nodes)} nodes, {len(sankey.links)} links, '
          f'{int(sankey.links["value"].sum()):,} responses')
    if len(sankey.links) == 0:
        print(f'  ⚠️  No links left for {left} → {right}'
              + (f' at min weight {min_weight}' if min_weight else ''))

    stem = f'{left}_to_{right}'
    if min_weight:
        stem += f'_min{min_weight}'

    if export_json:
        json_path = export_sankey_json(sankey, output_dir / 'sankey' / f'{stem}.json')
        print(f'  ✓ Saved: {json_path}')

    fig = create_sankey_figure(sankey, title=f'{left} → {right}')
    return save_figure(fig, output_dir / 'sankey' / f'{stem}.{fmt}')


def generate_figures(df, bars: List[str], mosaics: List[Tuple[str, str]],
                     sankeys: List[Tuple[str, str]], output_dir: Path,
                     fmt: str = 'html', image_format: str = 'png',
                     **sankey_options) -> Dict[str, Optional[Path]]:
    """
    Write every requested figure, continuing past failures

    Returns:
        Dict of figure name -> saved path (None if it failed)
    """
    jobs = []
    for column in bars:
        jobs.append((f'bar {column}',
                     lambda c=column: make_bar_chart(df, c, output_dir, image_format)))
    for x, y in mosaics:
        jobs.append((f'mosaic {x}:{y}',
                     lambda x=x, y=y: make_mosaic(df, x, y, output_dir, image_format)))
    for left, right in sankeys:
        jobs.append((f'sankey {left}:{right}',
                     lambda l=left, r=right: make_sankey(df, l, r, output_dir, fmt, **sankey_options)))

    results = {}
    for name, job in jobs:
        print(f'\n>>> {name}')
        try:
            path = job()
            print(f'  ✓ Saved: {path}')
            results[name] = path
        except Exception as e:
            print(f'  ❌ {name} failed: {e}')
            results[name] = None

    return results


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Generate bar charts, mosaic plots and Sankey diagrams from the coded survey',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Role breakdown plus a role → need Sankey
  python generate_all_figures.py --bar role --sankey role:need

  # Multi-select needs, rare links dropped, gray target nodes
  python generate_all_figures.py --sankey role:need --explode need --min-weight 2 --target-color
        """
    )

    parser.add_argument('--input', type=Path, default=DEFAULT_SURVEY_FILE,
                        help=f'Survey workbook or CSV (default: {DEFAULT_SURVEY_FILE})')
    parser.add_argument('--sheet', default=0,
                        help='Worksheet name or index (default: first sheet)')
    parser.add_argument('--bar', nargs='+', default=[], metavar='COLUMN',
                        help='Columns to plot as frequency bar charts')
    parser.add_argument('--mosaic', nargs='+', type=parse_pair, default=[], metavar='X:Y',
                        help='Column pairs to plot as mosaic plots')
    parser.add_argument('--sankey', nargs='+', type=parse_pair, default=[], metavar='LEFT:RIGHT',
                        help='Column pairs to plot as Sankey diagrams')
    parser.add_argument('--explode', nargs='+', default=[], metavar='COLUMN',
                        help='Multi-select columns to split into one row per answer')
    parser.add_argument('--min-weight', type=int, default=None,
                        help='Drop Sankey links with fewer responses than this')
    parser.add_argument('--target-group', default=DEFAULT_TARGET_GROUP,
                        help=f'Color group shared by Sankey targets (default: {DEFAULT_TARGET_GROUP})')
    parser.add_argument('--color-targets', action='store_true',
                        help='Give every Sankey target its own color instead of a shared group')
    parser.add_argument('--target-color', nargs='?', const=DEFAULT_TARGET_COLOR, default=None,
                        help=f'Pin the target group color (default when flag given: {DEFAULT_TARGET_COLOR})')
    parser.add_argument('--merge-shared-labels', action='store_true',
                        help='Merge Sankey nodes whose label appears on both sides')
    parser.add_argument('--palette', default=DEFAULT_PALETTE,
                        help=f'Seaborn palette for Sankey colors (default: {DEFAULT_PALETTE})')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible Sankey colors')
    parser.add_argument('--format', choices=INTERACTIVE_FORMATS + STATIC_FORMATS, default='html',
                        help='Sankey output format (default: html)')
    parser.add_argument('--image-format', choices=STATIC_FORMATS, default='png',
                        help='Bar/mosaic output format (default: png)')
    parser.add_argument('--export-json', action='store_true',
                        help='Also write Sankey node/link tables as JSON')
    parser.add_argument('--output-dir', type=Path, default=FIGURES,
                        help=f'Output directory (default: {FIGURES})')

    args = parser.parse_args(argv)

    if not (args.bar or args.mosaic or args.sankey):
        parser.error('nothing to do: pass at least one of --bar, --mosaic, --sankey')

    sheet = int(args.sheet) if str(args.sheet).isdigit() else args.sheet

    print('='*80)
    print('SURVEY FIGURES GENERATION')
    print('='*80)

    columns = sorted(set(
        args.bar
        + [c for pair in args.mosaic for c in pair]
        + [c for pair in args.sankey for c in pair]
        + args.explode
    ))

    start_time = time.time()

    df = load_survey(args.input, sheet_name=sheet)
    df = clean_survey(df, category_columns=columns)
    for column in args.explode:
        df = explode_multi_select(df, column)
        print(f'  ✓ Exploded {column}: {len(df):,} rows')
    validate_survey_dataset(df, category_columns=columns, name=args.input.name)

    results = generate_figures(
        df, args.bar, args.mosaic, args.sankey, args.output_dir,
        fmt=args.format,
        image_format=args.image_format,
        min_weight=args.min_weight,
        target_group=None if args.color_targets else args.target_group,
        target_color=args.target_color,
        merge_shared_labels=args.merge_shared_labels,
        palette=args.palette,
        seed=args.seed,
        export_json=args.export_json
    )

    elapsed = time.time() - start_time

    # Summary
    print('\n' + '='*80)
    print('GENERATION SUMMARY')
    print('='*80)

    for name, path in results.items():
        status = '✅ Success' if path is not None else '❌ Failed'
        print(f'  {name}: {status}')

    success_count = sum(1 for v in results.values() if v is not None)
    total_count = len(results)

    print(f'\nTotal: {success_count}/{total_count} figures generated successfully')
    print(f'Time elapsed: {elapsed:.1f}s')
    print(f'\n📁 Outputs saved to: {args.output_dir}/')

    if success_count == total_count:
        return 0
    print(f'\n⚠️  {total_count - success_count} figure(s) failed')
    return 1


if __name__ == '__main__':
    sys.exit(main())
