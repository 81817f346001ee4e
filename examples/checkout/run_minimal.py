"""
Minimal run: Application + pricing context with a user-defined rule.
To run: uvicorn run_minimal:app --reload
Then open http://localhost:8000/docs for Swagger UI, or
http://localhost:8000/pricing/queries/final_price?name=TV&price=600
"""
import sys
from pathlib import Path

# example lives in examples/checkout
sys.path.insert(0, str(Path(__file__).resolve().parent))

from cartrules import Config
from cartrules.service import create_app

import rules  # noqa: F401  registers "clearance"

app = create_app(Config(rules=["vip", "clearance", "holiday"]))
