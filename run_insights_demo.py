"""
IPD Insights Demo Runner
Seeds the reference players and reports insights for one of them
"""

import sys
import time
import logging
import json
from pathlib import Path

import numpy as np

# Setup paths
project_root = Path(__file__).parent
sys.path.append(str(project_root / "src"))
sys.path.append(str(project_root))

from insights import InsightsOrchestrator, InsightsError, Zone
from storage import InMemorySampleStore, seed_reference_players
from config.insights_config import INSIGHTS_ANALYSIS

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(name)s] %(levelname)s: %(message)s'
)
logger = logging.getLogger(__name__)


def run_insights_demo(player_id: int = 2, output_dir: Path = None) -> bool:
    """Compute and report insights for a seeded player."""
    output_dir = output_dir or project_root / "data" / "insights_reports"
    output_dir.mkdir(parents=True, exist_ok=True)

    store = InMemorySampleStore()
    start = time.time()
    inserted = seed_reference_players(store)
    logger.info(f"Seeded {inserted} samples for players {store.player_ids()} "
                f"in {time.time() - start:.2f}s")

    orchestrator = InsightsOrchestrator(INSIGHTS_ANALYSIS, store=store)

    start = time.time()
    try:
        result = orchestrator.compute_insights(player_id)
    except InsightsError as e:
        logger.error(f"Could not compute insights for player {player_id}: {e}")
        return False
    elapsed = time.time() - start

    logger.info(f"=== Insights for player {player_id} ===")
    logger.info(f"Entities analyzed: {len(result.stats)}")
    logger.info(f"Computation time: {elapsed:.3f}s")

    if result.stats:
        means = np.array([insight.mean for insight in result.stats.values()])
        runs = np.array([len(insight.crossings) for insight in result.stats.values()])
        logger.info(f"Mean distance across entities: {means.mean():.1f}cm")
        logger.info(f"Entities with zone crossings: {int(np.sum(runs > 1))}")

    for zone in Zone:
        logger.info(f"  {zone.value:>8} zone: {len(result.zones[zone])} entities")

    logger.info("Nearest neighbors:")
    for entry in result.neighbors:
        logger.info(f"  Player {entry.player_id}: {entry.delta:+.1f}cm")

    report_path = output_dir / f"player_{player_id}_insights.json"
    with open(report_path, 'w') as f:
        json.dump(result.to_dict(), f, indent=2)

    logger.info(f"\nDetailed report saved to: {report_path}")
    return True


if __name__ == "__main__":
    requested = int(sys.argv[1]) if len(sys.argv) > 1 else 2
    success = run_insights_demo(requested)
    sys.exit(0 if success else 1)
