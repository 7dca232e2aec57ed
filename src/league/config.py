import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Fixed seed makes every generated schedule reproducible (unset = random)
_seed = os.getenv("FIXTURE_SEED")
FIXTURE_SEED = int(_seed) if _seed not in (None, "") else None

MIN_SINGLES_PLAYERS = int(os.getenv("MIN_SINGLES_PLAYERS", "2"))
MIN_DOUBLES_PLAYERS = int(os.getenv("MIN_DOUBLES_PLAYERS", "4"))
