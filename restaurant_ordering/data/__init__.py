"""
Static data for the ordering workflow.

The meal catalog ships as JSON next to this module; numeric constants
(pizza pricing, enhancement deltas, facade placeholders) live in
``ordering_params``.
"""

from pathlib import Path

DATA_DIR = Path(__file__).parent
MEALS_CATALOG_PATH = DATA_DIR / "meals.json"
