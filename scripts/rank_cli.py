#!/usr/bin/env python
"""
PharmGap ranking CLI

Usage:
    python scripts/rank_cli.py top [N]          # top-N recommendations (default 10)
    python scripts/rank_cli.py stats            # dashboard statistics
    python scripts/rank_cli.py area <name>      # detail view of one kelurahan
    python scripts/rank_cli.py no-pharmacy      # where every area without a pharmacy ranks
    python scripts/rank_cli.py layers           # available map layers

Set DATA_DIR in .env to point at another dataset folder or URL.
"""

import sys
from pathlib import Path

# add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pharmgap.data_sources import DataUnavailableError
from pharmgap.domain.presentation import format_population
from pharmgap.logging_setup import configure_logging
from pharmgap.pipeline import DashboardOrchestrator, LOAD_ERROR_MESSAGE


def cmd_top(orchestrator: DashboardOrchestrator, limit: int = 10):
    """Print the recommendations table"""
    ranking = orchestrator.rank(top_k=limit)
    rows = orchestrator.presentation.rows(ranking.top)

    print("=" * 78)
    print(f"🏆 Top {limit} recommendations ({ranking.underserved_count} underserved areas)")
    print("=" * 78)

    if not rows:
        print("  (Tidak ada data area defisit)")
        return

    print(f"{'#':<4} {'Kelurahan':<26} {'Penduduk':>10} {'Apotek':>7} {'Defisit':>8} {'Skor':>6}  Status")
    print("-" * 78)
    for row in rows:
        badge = " ⚠️" if row.no_facility else ""
        print(
            f"{row.rank:<4} {row.name[:26]:<26} "
            f"{row.population_display:>10} "
            f"{row.existing_facilities:>7} "
            f"{row.deficit_display:>8} "
            f"{row.priority_score:>6.2f}  "
            f"{row.status_label}{badge}"
        )
    print("=" * 78)


def cmd_stats(orchestrator: DashboardOrchestrator):
    """Print the statistics cards"""
    stats = orchestrator.statistics(orchestrator.rank())

    print("=" * 40)
    print("📊 Statistics")
    print("=" * 40)
    print(f"  Population (shown):  {format_population(stats.reported_population)}")
    print(f"  Population (summed): {format_population(stats.total_population)}")
    print(f"  Pharmacies:          {stats.total_pharmacies}")
    print(f"  Hospitals:           {stats.total_hospitals}")
    print(f"  Reported deficit>0:  {stats.potential_areas}")
    print(f"  Underserved:         {stats.underserved_areas}")
    print(f"  Areas:               {stats.district_count}")
    print("=" * 40)


def cmd_area(orchestrator: DashboardOrchestrator, name: str):
    """Print the detail view of one area"""
    detail = orchestrator.detail(name)
    if detail is None:
        print(f"❌ Unknown area: {name}")
        return

    print("=" * 40)
    print(f"📍 {detail.name}")
    print("=" * 40)
    print(f"  Penduduk:         {detail.population_display}")
    print(f"  Apotek Eksisting: {detail.existing_facilities}")
    print(f"  Kebutuhan Ideal:  {detail.ideal_display}")
    print(f"  Defisit:          {detail.deficit_display}")
    print(f"  Status:           {detail.status_label}")
    print("=" * 40)


def cmd_no_pharmacy(orchestrator: DashboardOrchestrator):
    """Print the rank of every area without a pharmacy"""
    ranking = orchestrator.rank()

    print("=" * 70)
    print("🔍 Areas without a pharmacy")
    print("=" * 70)

    if not ranking.zero_facility_areas:
        print("  (none)")
        return

    for entry in ranking.zero_facility_areas:
        rank = entry.rank if entry.rank is not None else "-"
        top = "✅" if entry.in_top else "❌"
        print(
            f"{top} {str(entry.name):<26} pop={entry.population:<8} "
            f"ideal={entry.ideal_facility_count:<3} deficit={entry.deficit:<3} "
            f"score={entry.priority_score:.2f} rank={rank}"
        )
    print("=" * 70)


def cmd_layers(orchestrator: DashboardOrchestrator):
    """Print the map layers that could be loaded"""
    layers = orchestrator.source.load_layers()

    print("=" * 50)
    print("🗺️  Map layers")
    print("=" * 50)
    for layer in layers:
        print(f"  {layer.title:<34} {layer.kind:<8} {layer.feature_count}")
    print("=" * 50)


def print_help():
    """Print usage"""
    print(__doc__)


def main():
    if len(sys.argv) < 2:
        print_help()
        return

    configure_logging("WARNING")
    command = sys.argv[1].lower()
    orchestrator = DashboardOrchestrator()

    try:
        if command == "top":
            limit = int(sys.argv[2]) if len(sys.argv) > 2 else 10
            cmd_top(orchestrator, limit)
        elif command == "stats":
            cmd_stats(orchestrator)
        elif command == "area" and len(sys.argv) > 2:
            cmd_area(orchestrator, " ".join(sys.argv[2:]))
        elif command == "no-pharmacy":
            cmd_no_pharmacy(orchestrator)
        elif command == "layers":
            cmd_layers(orchestrator)
        elif command in ["help", "-h", "--help"]:
            print_help()
        else:
            print(f"❌ Unknown command: {command}")
            print_help()
    except DataUnavailableError as e:
        print(f"❌ {LOAD_ERROR_MESSAGE}\n   ({e})")
        sys.exit(1)


if __name__ == "__main__":
    main()
