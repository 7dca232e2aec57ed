from league.functions import generate_fixtures
from league.standings import calculate_standings, calculate_team_stats

__all__ = ["generate_fixtures", "calculate_standings", "calculate_team_stats"]
